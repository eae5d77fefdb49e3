from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.response import Response

from employee_management.apps.employees.api.serializers import EmployeeRequestSerializer, EmployeeResponseSerializer
from employee_management.apps.employees.application.services import EmployeeApplicationService


class EmployeeViewSet(viewsets.ViewSet):
    """
    ViewSet для управления сотрудниками.
    Сотрудник адресуется по email; бизнес-логика в EmployeeApplicationService,
    доменные ошибки переводятся в статусы обработчиком исключений.
    """
    lookup_field = 'email'
    lookup_value_regex = '[^/]+'

    def get_service(self) -> EmployeeApplicationService:
        return EmployeeApplicationService()

    @extend_schema(
        parameters=[
            OpenApiParameter(
                'departmentCode', str, required=False,
                description='Фильтр по коду подразделения (без учета регистра)',
            ),
        ],
        responses=EmployeeResponseSerializer(many=True),
    )
    def list(self, request):
        service = self.get_service()
        department_code = request.query_params.get('departmentCode')
        if department_code:
            employees = service.get_employees_by_department(department_code)
        else:
            employees = service.get_all_employees()
        return Response(EmployeeResponseSerializer(employees, many=True).data)

    @extend_schema(
        request=EmployeeRequestSerializer,
        responses={
            201: EmployeeResponseSerializer,
            400: OpenApiResponse(description='Некорректные данные или email уже существует'),
        },
    )
    def create(self, request):
        serializer = EmployeeRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        employee = self.get_service().create_employee(serializer.to_request())
        return Response(EmployeeResponseSerializer(employee).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        responses={
            200: EmployeeResponseSerializer,
            404: OpenApiResponse(description='Сотрудник не найден'),
        },
    )
    def retrieve(self, request, email=None):
        employee = self.get_service().get_employee(email)
        return Response(EmployeeResponseSerializer(employee).data)

    @extend_schema(
        request=EmployeeRequestSerializer,
        responses={
            200: EmployeeResponseSerializer,
            400: OpenApiResponse(description='Некорректные данные'),
            404: OpenApiResponse(description='Сотрудник не найден'),
        },
    )
    def update(self, request, email=None):
        serializer = EmployeeRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        employee = self.get_service().update_employee(email, serializer.to_request())
        return Response(EmployeeResponseSerializer(employee).data)

    @extend_schema(
        responses={
            204: None,
            404: OpenApiResponse(description='Сотрудник не найден'),
        },
    )
    def destroy(self, request, email=None):
        self.get_service().delete_employee(email)
        return Response(status=status.HTTP_204_NO_CONTENT)
