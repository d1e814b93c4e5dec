from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from src.application.container import container
from src.infrastructure.database.models import TradeModel
from src.infrastructure.database.repositories.trade_repository import TradeRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting application...")
    db_client = container.db_client()

    try:
        # 1) Create missing tables
        created_tables = await db_client.init()
        logger.info("Database initialized successfully")

        # 2) Seed the demo trade only when the Trades table was just created
        if TradeModel.__tablename__ in created_tables and container.config().seed_on_create:
            async with db_client.get_session() as session:
                await TradeRepository(session).seed_default_trade()
            logger.info("Seed trade ensured")

        yield

    except Exception as e:
        logger.error(f"Error during startup: {str(e)}")
        raise

    finally:
        logger.info("Shutting down application...")
        await db_client.close()
        logger.info("Application shut down successfully")
