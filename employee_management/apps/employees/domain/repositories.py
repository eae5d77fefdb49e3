from abc import ABC, abstractmethod
from typing import List, Optional
from employee_management.apps.employees.models import Employee


class EmployeeRepository(ABC):
    """
    Абстрактный репозиторий сотрудников.
    Сервис зависит только от этого контракта; поиск идет по email.
    """
    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Employee]:
        pass

    @abstractmethod
    def find_by_department_code(self, department_code: str) -> List[Employee]:
        """Без учета регистра кода подразделения."""
        pass

    @abstractmethod
    def find_all(self) -> List[Employee]:
        pass

    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        """
        Вставка или обновление. Нарушение уникальности email
        пробрасывается как django.db.IntegrityError.
        """
        pass

    @abstractmethod
    def delete_by_email(self, email: str):
        pass
