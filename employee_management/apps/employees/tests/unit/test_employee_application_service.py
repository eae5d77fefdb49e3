import pytest
from django.db import IntegrityError
from employee_management.apps.employees.application.services import EmployeeApplicationService
from employee_management.apps.employees.domain.exceptions import DuplicateEmailError, EmployeeNotFoundError
from employee_management.apps.employees.domain.repositories import EmployeeRepository
from employee_management.apps.employees.domain.value_objects import EmployeeRequest, EmployeeResponse
from employee_management.apps.employees.models import Employee


@pytest.fixture
def mock_repo(mocker):
    repo = mocker.Mock(spec=EmployeeRepository)
    repo.save.side_effect = lambda employee: employee
    return repo


@pytest.fixture
def service(mock_repo):
    return EmployeeApplicationService(employee_repository=mock_repo)


@pytest.fixture
def employee():
    return Employee(first_name='John', last_name='Doe', email='john.doe@gmail.com', department_code='IT')


@pytest.fixture
def employee_request():
    return EmployeeRequest('John', 'Doe', 'john.doe@gmail.com', 'IT')


class TestCreateEmployee:
    def test_create_employee_with_new_email(self, service, mock_repo, employee_request):
        """Создание сотрудника с новым email"""
        mock_repo.find_by_email.return_value = None

        response = service.create_employee(employee_request)

        assert response == EmployeeResponse('John', 'Doe', 'IT')
        mock_repo.find_by_email.assert_called_once_with('john.doe@gmail.com')
        mock_repo.save.assert_called_once()
        saved = mock_repo.save.call_args.args[0]
        assert isinstance(saved, Employee)
        assert saved.email == 'john.doe@gmail.com'

    def test_create_employee_with_existing_email(self, service, mock_repo, employee, employee_request):
        """Повторный email отклоняется без записи"""
        mock_repo.find_by_email.return_value = employee

        with pytest.raises(DuplicateEmailError) as exc_info:
            service.create_employee(employee_request)

        assert exc_info.value.email == 'john.doe@gmail.com'
        mock_repo.find_by_email.assert_called_once_with('john.doe@gmail.com')
        mock_repo.save.assert_not_called()

    def test_integrity_error_on_save_becomes_duplicate_email(self, service, mock_repo, employee_request):
        """Уникальный индекс сработал после проверки (гонка)"""
        mock_repo.find_by_email.return_value = None
        mock_repo.save.side_effect = IntegrityError('UNIQUE constraint failed: employees.email')

        with pytest.raises(DuplicateEmailError) as exc_info:
            service.create_employee(employee_request)

        assert exc_info.value.email == 'john.doe@gmail.com'
        assert isinstance(exc_info.value.__cause__, IntegrityError)


class TestReadEmployees:
    def test_get_all_employees_projects_every_record(self, service, mock_repo, employee):
        jane = Employee(first_name='Jane', last_name='Doe', email='jane.doe@gmail.com', department_code='IT')
        mock_repo.find_all.return_value = [employee, jane]

        responses = service.get_all_employees()

        assert responses == [
            EmployeeResponse('John', 'Doe', 'IT'),
            EmployeeResponse('Jane', 'Doe', 'IT'),
        ]
        assert all(not hasattr(r, 'email') for r in responses)

    def test_get_all_employees_empty(self, service, mock_repo):
        mock_repo.find_all.return_value = []

        assert service.get_all_employees() == []

    def test_get_employees_by_department(self, service, mock_repo, employee):
        mock_repo.find_by_department_code.return_value = [employee]

        responses = service.get_employees_by_department('it')

        assert responses == [EmployeeResponse('John', 'Doe', 'IT')]
        mock_repo.find_by_department_code.assert_called_once_with('it')

    def test_get_employee_missing(self, service, mock_repo):
        mock_repo.find_by_email.return_value = None

        with pytest.raises(EmployeeNotFoundError):
            service.get_employee('ghost@gmail.com')


class TestUpdateEmployee:
    def test_update_existing_employee(self, service, mock_repo, employee):
        """Обновление существующего сотрудника возвращает новую проекцию"""
        mock_repo.find_by_email.return_value = employee
        request = EmployeeRequest('Johnny', 'Dough', 'john.doe@gmail.com', 'HR')

        response = service.update_employee('john.doe@gmail.com', request)

        assert response == EmployeeResponse('Johnny', 'Dough', 'HR')
        mock_repo.find_by_email.assert_called_once_with('john.doe@gmail.com')
        mock_repo.save.assert_called_once_with(employee)

    def test_update_keeps_email(self, service, mock_repo, employee):
        mock_repo.find_by_email.return_value = employee
        request = EmployeeRequest('John', 'Doe', 'other@gmail.com', 'IT')

        service.update_employee('john.doe@gmail.com', request)

        assert employee.email == 'john.doe@gmail.com'

    def test_update_missing_employee(self, service, mock_repo, employee_request):
        mock_repo.find_by_email.return_value = None

        with pytest.raises(EmployeeNotFoundError) as exc_info:
            service.update_employee('john.doe@gmail.com', employee_request)

        assert exc_info.value.email == 'john.doe@gmail.com'
        mock_repo.save.assert_not_called()


class TestDeleteEmployee:
    def test_delete_existing_employee(self, service, mock_repo, employee):
        mock_repo.find_by_email.return_value = employee

        service.delete_employee('john.doe@gmail.com')

        mock_repo.find_by_email.assert_called_once_with('john.doe@gmail.com')
        mock_repo.delete_by_email.assert_called_once_with('john.doe@gmail.com')

    def test_delete_missing_employee(self, service, mock_repo):
        mock_repo.find_by_email.return_value = None

        with pytest.raises(EmployeeNotFoundError):
            service.delete_employee('john.doe@gmail.com')

        mock_repo.delete_by_email.assert_not_called()
