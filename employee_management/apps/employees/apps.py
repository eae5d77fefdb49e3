"""
Конфигурация приложения employees
"""
from django.apps import AppConfig


class EmployeesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'employee_management.apps.employees'
    verbose_name = 'Сотрудники'
