from rest_framework import serializers
from django.contrib.auth.models import User

from task.models import Task
from user.roles import display_name


class TaskUserSerializer(serializers.ModelSerializer):
    name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ('id', 'name', 'email')

    def get_name(self, obj):
        return display_name(obj)


class TaskSerializer(serializers.ModelSerializer):
    assigned_to = TaskUserSerializer(read_only=True)
    created_by = TaskUserSerializer(read_only=True)

    class Meta:
        model = Task
        fields = (
            'id',
            'title',
            'description',
            'status',
            'priority',
            'due_date',
            'assigned_to',
            'created_by',
            'is_deleted',
            'created_at',
            'updated_at',
        )


class TaskWriteSerializer(serializers.ModelSerializer):
    assigned_to = serializers.PrimaryKeyRelatedField(queryset=User.objects.all(), required=False)

    class Meta:
        model = Task
        fields = (
            'title',
            'description',
            'status',
            'priority',
            'due_date',
            'assigned_to',
        )
        extra_kwargs = {
            'title': {'error_messages': {'required': 'Please provide a task title'}},
            'description': {'error_messages': {'required': 'Please provide a task description'}},
        }


class TaskStatusCountSerializer(serializers.Serializer):
    status = serializers.CharField()
    count = serializers.IntegerField()


class TaskPriorityCountSerializer(serializers.Serializer):
    priority = serializers.CharField()
    count = serializers.IntegerField()


class TaskStatsSerializer(serializers.Serializer):
    by_status = TaskStatusCountSerializer(many=True)
    by_priority = TaskPriorityCountSerializer(many=True)
