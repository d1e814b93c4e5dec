import logging
from datetime import datetime, timezone
from typing import List

from src.commons.exceptions import (
    TradeIdMismatchError,
    TradeNotFoundError,
    TradeUpdateConflictError,
)
from src.domain.trades.dtos.trade_dto import TradeDTO
from src.infrastructure.database.client import DatabaseClient
from src.infrastructure.database.repositories.trade_repository import TradeRepository


logger = logging.getLogger(__name__)


class TradesService:
    def __init__(self, db_client: DatabaseClient):
        self.db_client = db_client

    async def list_trades(self) -> List[TradeDTO]:
        async with self.db_client.get_session() as session:
            return await TradeRepository(session).list_all()

    async def get_trade(self, trade_id: int) -> TradeDTO:
        async with self.db_client.get_session() as session:
            trade = await TradeRepository(session).get_by_id(trade_id)

        if trade is None:
            logger.warning(f"Trade {trade_id} not found")
            raise TradeNotFoundError(trade_id)
        return trade

    async def create_trade(self, trade: TradeDTO) -> TradeDTO:
        to_insert = self._with_trade_date(trade.model_copy(update={"id": None}))

        async with self.db_client.get_session() as session:
            created = await TradeRepository(session).add(to_insert)

        logger.info(
            f"Trade created: id={created.id} {created.commodity} "
            f"{created.quantity} @ {created.price}"
        )
        return created

    async def update_trade(self, trade_id: int, trade: TradeDTO) -> None:
        if trade.id != trade_id:
            logger.warning(
                f"Rejected update: path id {trade_id} != body id {trade.id}")
            raise TradeIdMismatchError(trade_id, trade.id)

        vanished = False
        async with self.db_client.get_session() as session:
            repo = TradeRepository(session)
            try:
                await repo.replace(self._with_trade_date(trade))
            except TradeUpdateConflictError:
                if await repo.exists(trade_id):
                    raise
                vanished = True

        if vanished:
            logger.warning(f"Trade {trade_id} vanished before update")
            raise TradeNotFoundError(trade_id)

        logger.info(f"Trade updated: id={trade_id}")

    async def delete_trade(self, trade_id: int) -> None:
        async with self.db_client.get_session() as session:
            deleted = await TradeRepository(session).delete(trade_id)

        if not deleted:
            logger.warning(f"Trade {trade_id} not found for deletion")
            raise TradeNotFoundError(trade_id)

        logger.info(f"Trade deleted: id={trade_id}")

    @staticmethod
    def _with_trade_date(trade: TradeDTO) -> TradeDTO:
        """Default an unset trade date to the current UTC time."""
        if trade.has_trade_date:
            return trade
        return trade.model_copy(update={"trade_date": datetime.now(timezone.utc)})
