"""Cinema DTOs"""

from src.service.cinema.app.dto.catalog_snapshot import CatalogSnapshot
from src.service.cinema.app.dto.operation_result import OperationResult


__all__ = ['CatalogSnapshot', 'OperationResult']
