from django.db import models
from django.contrib.auth.models import User
from django.core.exceptions import ValidationError


class Status(models.TextChoices):
    TODO = 'todo', 'To Do'
    IN_PROGRESS = 'in-progress', 'In Progress'
    DONE = 'done', 'Done'


class Priority(models.TextChoices):
    LOW = 'low', 'Low'
    MEDIUM = 'medium', 'Medium'
    HIGH = 'high', 'High'


class TaskQuerySet(models.QuerySet):
    def active(self):
        """Tasks that have not been soft deleted."""
        return self.filter(is_deleted=False)

    def with_people(self):
        return self.select_related('assigned_to', 'created_by')


class Task(models.Model):
    title = models.CharField(max_length=100)
    description = models.CharField(max_length=500)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.TODO)
    priority = models.CharField(max_length=10, choices=Priority.choices, default=Priority.MEDIUM)
    due_date = models.DateField(null=True, blank=True)
    # PROTECT: tasks are never removed as a side effect of deleting a user
    assigned_to = models.ForeignKey(User, on_delete=models.PROTECT, related_name='assigned_tasks')
    created_by = models.ForeignKey(User, on_delete=models.PROTECT, related_name='created_tasks')
    is_deleted = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TaskQuerySet.as_manager()

    def __str__(self):
        return self.title

    def clean(self):
        self.title = (self.title or '').strip()
        if not self.title:
            raise ValidationError({'title': 'Please provide a task title'})
        if not (self.description or '').strip():
            raise ValidationError({'description': 'Please provide a task description'})

    class Meta:
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['assigned_to', 'is_deleted'], name='task_assigned_deleted_idx'),
            models.Index(fields=['created_by', 'is_deleted'], name='task_created_deleted_idx'),
        ]
