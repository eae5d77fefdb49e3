"""
Доменные ошибки сотрудников.

Ошибки не знают о HTTP: сопоставление со статусами делает
обработчик исключений в apps.common.
"""


class EmployeeError(Exception):
    """Базовая ошибка домена сотрудников."""


class DuplicateEmailError(EmployeeError):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Сотрудник с email {email} уже существует.")


class EmployeeNotFoundError(EmployeeError):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Сотрудник с email {email} не найден.")
