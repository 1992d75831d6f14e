"""Cinema Interfaces"""

from src.service.cinema.app.interface.i_catalog_repo import ICatalogRepo


__all__ = ['ICatalogRepo']
