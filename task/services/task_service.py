"""
Task access control and queries.

Every read and write of tasks goes through ``TaskService``; it decides which
tasks a caller may see or change. Callers are identified by ``(user_id, role)``
as resolved by the authentication layer.

Visibility and permissions:
- admin: sees and may change every task
- user: sees, reads and updates only tasks assigned to them
- delete: admin, or the user who created the task
- soft-deleted tasks behave as if they did not exist
"""
import logging

from django.db.models import Count

from task.exceptions import InvalidTaskIdError, TaskAccessDenied, TaskDeleteDenied, TaskUpdateDenied
from task.filters import TaskFilter
from task.models import Task
from user.roles import is_admin
from utils.custom_paginator import OffsetPaginator

logger = logging.getLogger(__name__)

DEFAULT_ORDERING = ('-created_at', '-id')

# Fields a caller may set on create or patch; everything else is ignored.
WRITABLE_FIELDS = ('title', 'description', 'status', 'priority', 'due_date', 'assigned_to')


def _same_user(user_id, other_id):
    return str(user_id) == str(other_id)


def _user_pk(value):
    """Accept a User instance or a raw primary key."""
    return getattr(value, 'pk', value)


def _parse_task_id(task_id):
    try:
        return int(task_id)
    except (TypeError, ValueError) as exc:
        raise InvalidTaskIdError(task_id) from exc


class TaskService:

    def __init__(self, paginator=None):
        self.paginator = paginator or OffsetPaginator()

    def _find_active(self, task_id):
        return Task.objects.active().filter(pk=_parse_task_id(task_id)).first()

    def _reload(self, task):
        return Task.objects.with_people().get(pk=task.pk)

    def _apply(self, task, data):
        for field in WRITABLE_FIELDS:
            if field not in data:
                continue
            if field == 'assigned_to':
                task.assigned_to_id = _user_pk(data[field])
            else:
                setattr(task, field, data[field])

    def create_task(self, task_data, user_id):
        """Create a task owned by ``user_id``; unassigned tasks go to the creator."""
        task = Task(created_by_id=user_id)
        self._apply(task, task_data)
        if not task_data.get('assigned_to'):
            task.assigned_to_id = user_id

        task.full_clean()
        task.save()

        logger.info(f"Task {task.pk} created by user {user_id}, assigned to {task.assigned_to_id}")
        return self._reload(task)

    def get_tasks(self, user_id, user_role, query):
        """
        One page of the tasks visible to the caller.

        ``query`` accepts ``page``, ``limit``, ``status``, ``priority`` and
        ``sortBy``. Returns ``{"tasks": [...], "pagination": {...}}``.
        """
        queryset = Task.objects.active().with_people().order_by(*DEFAULT_ORDERING)

        # Regular users only see their assigned tasks
        if not is_admin(user_role):
            queryset = queryset.filter(assigned_to_id=user_id)

        queryset = TaskFilter(data=query, queryset=queryset).qs

        tasks, pagination = self.paginator.paginate(queryset, query)
        return {'tasks': tasks, 'pagination': pagination}

    def get_task_by_id(self, task_id, user_id, user_role):
        """The task, or None when it does not exist or was deleted."""
        task = Task.objects.active().with_people().filter(pk=_parse_task_id(task_id)).first()
        if task is None:
            return None

        if not is_admin(user_role) and not _same_user(task.assigned_to_id, user_id):
            logger.warning(f"User {user_id} denied access to task {task.pk}")
            raise TaskAccessDenied()

        return task

    def update_task(self, task_id, update_data, user_id, user_role):
        """Partially update a task. Authorization follows the assignee, like reads."""
        task = self._find_active(task_id)
        if task is None:
            return None

        if not is_admin(user_role) and not _same_user(task.assigned_to_id, user_id):
            logger.warning(f"User {user_id} denied update of task {task.pk}")
            raise TaskUpdateDenied()

        self._apply(task, update_data)
        task.full_clean()
        task.save()

        return self._reload(task)

    def delete_task(self, task_id, user_id, user_role):
        """
        Soft delete a task.

        Only admins and the task's creator may delete, even though updates are
        allowed for the assignee.
        """
        task = self._find_active(task_id)
        if task is None:
            return None

        if not is_admin(user_role) and not _same_user(task.created_by_id, user_id):
            logger.warning(f"User {user_id} denied delete of task {task.pk}")
            raise TaskDeleteDenied()

        task.is_deleted = True
        task.save(update_fields=['is_deleted', 'updated_at'])

        logger.info(f"Task {task.pk} soft deleted by user {user_id}")
        return task

    def get_task_stats(self):
        """Counts of live tasks grouped by status and, separately, by priority."""
        active = Task.objects.active()

        by_status = (
            active.values('status')
            .annotate(count=Count('id'))
            .order_by('status')
        )
        by_priority = (
            active.values('priority')
            .annotate(count=Count('id'))
            .order_by('priority')
        )

        return {
            'by_status': list(by_status),
            'by_priority': list(by_priority),
        }


task_service = TaskService()
