from rest_framework import serializers
from employee_management.apps.employees.domain.value_objects import EmployeeRequest


class EmployeeRequestSerializer(serializers.Serializer):
    """
    Входные данные сотрудника (JSON в camelCase).
    """
    firstName = serializers.CharField(source='first_name', max_length=100)
    lastName = serializers.CharField(source='last_name', max_length=100)
    email = serializers.EmailField(max_length=254)
    departmentCode = serializers.CharField(source='department_code', max_length=20)

    def to_request(self) -> EmployeeRequest:
        return EmployeeRequest(**self.validated_data)


class EmployeeResponseSerializer(serializers.Serializer):
    """
    Проекция сотрудника: email и id в ответ не попадают.
    """
    firstName = serializers.CharField(source='first_name', read_only=True)
    lastName = serializers.CharField(source='last_name', read_only=True)
    departmentCode = serializers.CharField(source='department_code', read_only=True)
