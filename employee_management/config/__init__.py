"""
Django project package for the employee records service.

Settings live in ``employee_management.config.settings``; pick a module
via ``DJANGO_SETTINGS_MODULE`` (``sqlite`` for local development,
``production`` for deployments, ``test`` for the test suite).
"""
