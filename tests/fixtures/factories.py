import factory
from factory.django import DjangoModelFactory
from employee_management.apps.employees.models import Employee


class EmployeeFactory(DjangoModelFactory):
    class Meta:
        model = Employee
        django_get_or_create = ('email',)

    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    email = factory.Sequence(lambda n: f'employee{n}@example.com')
    department_code = 'IT'
