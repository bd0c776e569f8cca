import django_filters
from django_filters.constants import EMPTY_VALUES

from task.models import Priority, Status, Task


class StableOrderingFilter(django_filters.OrderingFilter):
    """OrderingFilter that always breaks ties on id so pages never overlap."""

    def filter(self, qs, value):
        if value in EMPTY_VALUES:
            return qs
        ordering = [self.get_ordering_value(param) for param in value]
        return qs.order_by(*ordering, '-id')


class TaskFilter(django_filters.FilterSet):
    """
    Query-parameter filters for the task list.

    Invalid values fail form validation and are dropped, which leaves the
    queryset unfiltered (status/priority) or in its default order (sortBy).
    """
    status = django_filters.ChoiceFilter(choices=Status.choices)
    priority = django_filters.ChoiceFilter(choices=Priority.choices)
    sortBy = StableOrderingFilter(
        fields=(
            ('created_at', 'createdAt'),
            ('updated_at', 'updatedAt'),
            ('due_date', 'dueDate'),
            ('title', 'title'),
            ('status', 'status'),
            ('priority', 'priority'),
        ),
    )

    class Meta:
        model = Task
        fields = ['status', 'priority']
