from fastapi import FastAPI
from dependency_injector import providers
from src.application.container import container as root_container


def register_modules(app: FastAPI, api_prefix: str = "/api"):
    # Register Health Module
    from src.domain.health.module import HealthModule
    from src.domain.health.controller import router as health_router

    health_container = HealthModule(
        root=providers.DependenciesContainer(
            db_client=root_container.db_client,
            config=root_container.config,
        )
    )
    health_container.wire(modules=["src.domain.health.controller"])

    app.include_router(health_router)
    app.state.health_container = health_container

    # Register Trades Module
    from src.domain.trades.trades_module import TradesModule
    from src.domain.trades.controller import router as trades_router

    trades_container = TradesModule(
        root=providers.DependenciesContainer(
            db_client=root_container.db_client,
        )
    )
    trades_container.wire(modules=["src.domain.trades.controller"])

    app.include_router(trades_router, prefix=api_prefix)
    app.state.trades_container = trades_container
