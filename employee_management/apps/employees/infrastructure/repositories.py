import logging
from typing import List, Optional
from django.db import transaction
from employee_management.apps.employees.models import Employee
from employee_management.apps.employees.domain.repositories import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeRepositoryImpl(EmployeeRepository):
    """
    Конкретная реализация репозитория сотрудников,
    использующая Django ORM.
    """
    def find_by_email(self, email: str) -> Optional[Employee]:
        return Employee.objects.filter(email=email).first()

    def find_by_department_code(self, department_code: str) -> List[Employee]:
        return list(Employee.objects.filter(department_code__iexact=department_code))

    def find_all(self) -> List[Employee]:
        return list(Employee.objects.all())

    def save(self, employee: Employee) -> Employee:
        # Отдельный savepoint: после IntegrityError внешняя транзакция остается рабочей
        with transaction.atomic():
            employee.save()
        return employee

    def delete_by_email(self, email: str):
        deleted, _ = Employee.objects.filter(email=email).delete()
        logger.debug("Deleted %s employee row(s) for %s", deleted, email)
