"""
Обработчик исключений DRF: переводит доменные ошибки в HTTP ответы.

Домен ничего не знает о статусах; таблица соответствия живет здесь.
Прочие исключения обрабатываются стандартным обработчиком DRF.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from employee_management.apps.employees.domain.exceptions import DuplicateEmailError, EmployeeNotFoundError

logger = logging.getLogger(__name__)

DOMAIN_ERROR_STATUSES = {
    DuplicateEmailError: status.HTTP_400_BAD_REQUEST,
    EmployeeNotFoundError: status.HTTP_404_NOT_FOUND,
}


def domain_exception_handler(exc, context):
    for error_class, status_code in DOMAIN_ERROR_STATUSES.items():
        if isinstance(exc, error_class):
            request = context.get('request')
            path = request.path if request is not None else ''
            logger.info("%s on %s: %s", type(exc).__name__, path, exc)
            return Response({'detail': str(exc)}, status=status_code)
    return exception_handler(exc, context)
