import logging.config

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.application.container import container
from src.application.error_handlers import register_error_handlers
from src.application.lifecycle import lifespan
from src.application.module_registry import register_modules


def create_app() -> FastAPI:
    settings = container.config()
    logging.config.dictConfig(settings.get_logging_config())

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Record-keeping API for commodity trades",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_error_handlers(app)
    register_modules(app, api_prefix=settings.api_prefix)

    return app


app = create_app()
