from dependency_injector import containers, providers
from .trades_service import TradesService


class TradesModule(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(modules=[".controller"])
    root = providers.DependenciesContainer()

    service = providers.Factory(
        TradesService,
        db_client=root.db_client,
    )
