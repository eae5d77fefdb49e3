from django.contrib import admin
from employee_management.apps.employees.models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ['email', 'last_name', 'first_name', 'department_code', 'created_at']
    list_filter = ['department_code']
    search_fields = ['email', 'last_name', 'first_name', 'department_code']
    readonly_fields = ['created_at', 'updated_at']
    fieldsets = (
        ('Основная информация', {
            'fields': ('last_name', 'first_name', 'email', 'department_code')
        }),
        ('Системная информация', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
