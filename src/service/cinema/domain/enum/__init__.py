"""Cinema Domain Enums"""

from src.service.cinema.domain.enum.operation_status import SUCCESS_STATUSES, OperationStatus


__all__ = ['OperationStatus', 'SUCCESS_STATUSES']
