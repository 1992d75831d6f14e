"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.cinema.app.catalog_store import CatalogStore
from src.service.cinema.driven_adapter.repo.flat_file_catalog_repo import FlatFileCatalogRepo
from src.service.cinema.driving_adapter.console_presenter import ConsolePresenter


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Repositories
    catalog_repo = providers.Factory(FlatFileCatalogRepo.from_settings, settings=config_service)

    # Loads the catalog files on first access
    catalog_store = providers.Singleton(CatalogStore, repo=catalog_repo)

    console_presenter = providers.Singleton(ConsolePresenter)


container = Container()