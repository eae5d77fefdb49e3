from django.db import models
from django.db.models.functions import Upper


class Employee(models.Model):
    """Модель сотрудника"""

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    # Email - естественный ключ поиска, уникален на уровне БД
    email = models.EmailField(max_length=254, unique=True)
    department_code = models.CharField(max_length=20, blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'employees'
        verbose_name = 'Сотрудник'
        verbose_name_plural = 'Сотрудники'
        indexes = [
            # department_code__iexact сравнивает через UPPER()
            models.Index(Upper('department_code'), name='employees_dept_code_upper_idx'),
        ]

    def __str__(self):
        return f"{self.last_name} {self.first_name} <{self.email}>"
