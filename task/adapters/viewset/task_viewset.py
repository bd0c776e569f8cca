from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from task.exceptions import TaskAuthorizationError
from task.permission import IsAdminRole
from task.services.task_service import task_service
from user.roles import get_user_role
from ..serializers.task_serializer import TaskSerializer, TaskStatsSerializer, TaskWriteSerializer

TASK_NOT_FOUND = {'success': False, 'message': 'Task not found'}


def _forbidden(error):
    return Response({'success': False, 'message': error.message}, status=status.HTTP_403_FORBIDDEN)


class TaskViewSet(viewsets.ViewSet):
    """
    Tasks API.

    Thin HTTP layer over ``task_service``:
    - the service applies role scoping, ownership checks and soft delete
    - a None result becomes 404, an authorization error becomes 403
    - write serializer validates input, read serializer shapes output
    """
    permission_classes = [IsAuthenticated]
    serializer_class = TaskSerializer
    lookup_value_regex = '[^/]+'

    def _caller(self, request):
        return request.user.id, get_user_role(request.user)

    @extend_schema(
        parameters=[
            OpenApiParameter('page', OpenApiTypes.INT),
            OpenApiParameter('limit', OpenApiTypes.INT),
            OpenApiParameter('status', OpenApiTypes.STR),
            OpenApiParameter('priority', OpenApiTypes.STR),
            OpenApiParameter('sortBy', OpenApiTypes.STR, description='e.g. -createdAt, dueDate'),
        ],
        responses={200: TaskSerializer(many=True)},
    )
    def list(self, request):
        user_id, role = self._caller(request)
        result = task_service.get_tasks(user_id, role, request.query_params)

        return Response({
            'success': True,
            'data': TaskSerializer(result['tasks'], many=True).data,
            'pagination': result['pagination'],
        })

    @extend_schema(request=TaskWriteSerializer, responses={201: TaskSerializer})
    def create(self, request):
        write_serializer = TaskWriteSerializer(data=request.data)
        write_serializer.is_valid(raise_exception=True)

        task = task_service.create_task(write_serializer.validated_data, request.user.id)
        return Response({'success': True, 'data': TaskSerializer(task).data}, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: TaskSerializer})
    def retrieve(self, request, pk=None):
        user_id, role = self._caller(request)
        try:
            task = task_service.get_task_by_id(pk, user_id, role)
        except TaskAuthorizationError as error:
            return _forbidden(error)

        if task is None:
            return Response(TASK_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response({'success': True, 'data': TaskSerializer(task).data})

    @extend_schema(request=TaskWriteSerializer, responses={200: TaskSerializer})
    def update(self, request, pk=None):
        # PUT and PATCH are both partial: omitted fields keep their values
        write_serializer = TaskWriteSerializer(data=request.data, partial=True)
        write_serializer.is_valid(raise_exception=True)

        user_id, role = self._caller(request)
        try:
            task = task_service.update_task(pk, write_serializer.validated_data, user_id, role)
        except TaskAuthorizationError as error:
            return _forbidden(error)

        if task is None:
            return Response(TASK_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response({'success': True, 'data': TaskSerializer(task).data})

    @extend_schema(request=TaskWriteSerializer, responses={200: TaskSerializer})
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        user_id, role = self._caller(request)
        try:
            task = task_service.delete_task(pk, user_id, role)
        except TaskAuthorizationError as error:
            return _forbidden(error)

        if task is None:
            return Response(TASK_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response({'success': True, 'message': 'Task deleted successfully'})

    @extend_schema(responses={200: TaskStatsSerializer})
    @action(detail=False, methods=['get'], permission_classes=[IsAuthenticated, IsAdminRole])
    def stats(self, request):
        return Response({'success': True, 'data': task_service.get_task_stats()})
