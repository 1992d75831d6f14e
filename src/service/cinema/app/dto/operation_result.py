"""
Operation Result DTO

Outcome of a catalog mutation. Recoverable outcomes such as a taken seat
are reported here instead of being raised.
"""

import attrs

from src.service.cinema.domain.enum.operation_status import SUCCESS_STATUSES, OperationStatus


@attrs.define(frozen=True)
class OperationResult:
    status: OperationStatus
    detail: str = ''

    @property
    def succeeded(self) -> bool:
        return self.status in SUCCESS_STATUSES

    @classmethod
    def of(cls, status: OperationStatus, detail: object = '') -> 'OperationResult':
        return cls(status=status, detail=str(detail))
