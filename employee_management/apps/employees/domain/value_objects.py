from dataclasses import dataclass
from employee_management.apps.employees.models import Employee


@dataclass(frozen=True)
class EmployeeRequest:
    first_name: str
    last_name: str
    email: str
    department_code: str

    def to_employee(self) -> Employee:
        return Employee(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            department_code=self.department_code,
        )


@dataclass(frozen=True)
class EmployeeResponse:
    """Проекция сотрудника для ответа: email и id не отдаются."""
    first_name: str
    last_name: str
    department_code: str

    @classmethod
    def from_employee(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            first_name=employee.first_name,
            last_name=employee.last_name,
            department_code=employee.department_code,
        )
