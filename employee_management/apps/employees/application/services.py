"""
Сервисный слой для управления сотрудниками
"""
import logging
from typing import List
from django.db import IntegrityError

from employee_management.apps.employees.domain.exceptions import DuplicateEmailError, EmployeeNotFoundError
from employee_management.apps.employees.domain.repositories import EmployeeRepository
from employee_management.apps.employees.domain.value_objects import EmployeeRequest, EmployeeResponse
from employee_management.apps.employees.infrastructure.repositories import EmployeeRepositoryImpl
from employee_management.apps.employees.models import Employee

logger = logging.getLogger(__name__)


class EmployeeApplicationService:
    """
    Сервис для управления бизнес-логикой сотрудников.
    Единственное правило домена: email сотрудника уникален.
    """
    def __init__(self, employee_repository: EmployeeRepository = EmployeeRepositoryImpl()):
        self.employee_repository = employee_repository

    def create_employee(self, request: EmployeeRequest) -> EmployeeResponse:
        """
        Создание сотрудника

        Args:
            request: Данные нового сотрудника

        Returns:
            EmployeeResponse: Проекция сохраненного сотрудника

        Raises:
            DuplicateEmailError: email уже занят (в том числе при гонке двух запросов,
                когда срабатывает уникальный индекс БД)
        """
        if self.employee_repository.find_by_email(request.email) is not None:
            logger.warning("Rejected employee creation: email %s already exists", request.email)
            raise DuplicateEmailError(request.email)

        try:
            saved = self.employee_repository.save(request.to_employee())
        except IntegrityError as exc:
            # Проверка выше не атомарна; гарантию дает уникальный индекс
            logger.warning("Unique constraint rejected employee %s", request.email)
            raise DuplicateEmailError(request.email) from exc

        logger.info("Created employee %s", request.email)
        return EmployeeResponse.from_employee(saved)

    def get_all_employees(self) -> List[EmployeeResponse]:
        return [EmployeeResponse.from_employee(e) for e in self.employee_repository.find_all()]

    def get_employee(self, email: str) -> EmployeeResponse:
        return EmployeeResponse.from_employee(self._get_existing(email))

    def get_employees_by_department(self, department_code: str) -> List[EmployeeResponse]:
        employees = self.employee_repository.find_by_department_code(department_code)
        return [EmployeeResponse.from_employee(e) for e in employees]

    def update_employee(self, email: str, request: EmployeeRequest) -> EmployeeResponse:
        """
        Обновление имени, фамилии и кода подразделения.
        Email является ключом и не меняется; request.email игнорируется.
        """
        employee = self._get_existing(email)
        employee.first_name = request.first_name
        employee.last_name = request.last_name
        employee.department_code = request.department_code
        saved = self.employee_repository.save(employee)
        logger.info("Updated employee %s", email)
        return EmployeeResponse.from_employee(saved)

    def delete_employee(self, email: str):
        self._get_existing(email)
        self.employee_repository.delete_by_email(email)
        logger.info("Deleted employee %s", email)

    def _get_existing(self, email: str) -> Employee:
        employee = self.employee_repository.find_by_email(email)
        if employee is None:
            raise EmployeeNotFoundError(email)
        return employee
