from dependency_injector import containers, providers
from src.infrastructure.database.client import DatabaseClient
from src.infrastructure.config.settings import Settings


class Container(containers.DeclarativeContainer):
    config = providers.Singleton(Settings)

    db_client = providers.Singleton(
        DatabaseClient,
        db_url=config.provided.async_database_url,
        pool_size=config.provided.db_pool_size,
        max_overflow=config.provided.db_max_overflow,
        pool_timeout=config.provided.db_pool_timeout,
        pool_recycle=config.provided.db_pool_recycle,
        echo=config.provided.db_echo,
    )


container = Container()
