"""Dependency injection container for the Monkey Explorer application."""

from dependency_injector import containers, providers

from monkeyexplorer.catalog.service import CatalogService
from monkeyexplorer.core.config import get_config
from monkeyexplorer.species.seed import load_seed
from monkeyexplorer.system.path_resolver import PathResolver


class Container(containers.DeclarativeContainer):
    """Application dependency injection container.

    The catalog service is a singleton: one catalog and one random access
    counter for the lifetime of the process.
    """

    path_resolver = providers.Singleton(PathResolver)

    # Overridden by the CLI when --config is given
    config_path = providers.Object(None)

    config = providers.Singleton(
        get_config,
        path_resolver=path_resolver,
        config_path=config_path,
    )

    seed_source = providers.Object(load_seed)

    catalog_service = providers.Singleton(
        CatalogService,
        seed_source=seed_source,
        random_seed=config.provided.catalog.random_seed,
    )
