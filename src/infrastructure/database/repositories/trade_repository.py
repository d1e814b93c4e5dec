import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.commons.exceptions import TradeUpdateConflictError
from src.domain.trades.dtos.trade_dto import TradeDTO
from src.infrastructure.database.models.trade_model import TradeModel

logger = logging.getLogger(__name__)

SEED_COMMODITY = "Crude Oil"
SEED_QUANTITY = Decimal("1000")
SEED_PRICE = Decimal("72.50")
SEED_COUNTERPARTY = "Acme"
SEED_AGE = timedelta(days=3)


class TradeRepository:
    """
    Repository for trade persistence.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository.

        Args:
            session: Database session
        """
        self.session = session

    async def list_all(self) -> List[TradeDTO]:
        """All trades, most recent trade date first."""
        stmt = select(TradeModel).order_by(
            TradeModel.trade_date.desc(),
            TradeModel.id.desc(),
        )
        result = await self.session.execute(stmt)
        return [self._model_to_dto(m) for m in result.scalars().all()]

    async def get_by_id(self, trade_id: int) -> Optional[TradeDTO]:
        """Get trade by ID."""
        model = await self.session.get(TradeModel, trade_id)
        if not model:
            return None
        return self._model_to_dto(model)

    async def exists(self, trade_id: int) -> bool:
        stmt = select(TradeModel.id).where(TradeModel.id == trade_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def add(self, trade: TradeDTO) -> TradeDTO:
        """
        Insert a trade. The id on the DTO is ignored; storage assigns one.

        Args:
            trade: Trade to insert, with trade_date already resolved

        Returns:
            Stored trade including its assigned id
        """
        model = TradeModel(**self._column_values(trade))

        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)

        return self._model_to_dto(model)

    async def replace(self, trade: TradeDTO) -> None:
        """
        Overwrite every column of the row matching ``trade.id``.

        The row is not read first. If the UPDATE matches nothing a
        TradeUpdateConflictError is raised and nothing is committed.
        """
        stmt = (
            update(TradeModel)
            .where(TradeModel.id == trade.id)
            .values(**self._column_values(trade))
        )
        result = await self.session.execute(stmt)

        if result.rowcount == 0:
            raise TradeUpdateConflictError(trade.id)

        await self.session.commit()

    async def delete(self, trade_id: int) -> bool:
        """Delete a trade by ID. Returns False if it does not exist."""
        model = await self.session.get(TradeModel, trade_id)
        if not model:
            return False

        await self.session.delete(model)
        await self.session.commit()
        return True

    async def seed_default_trade(self) -> Optional[TradeDTO]:
        """
        Insert the demo trade on an empty table.

        Returns None without writing when any trade already exists.
        """
        stmt = select(func.count()).select_from(TradeModel)
        count = (await self.session.execute(stmt)).scalar_one()
        if count:
            return None

        seeded = await self.add(
            TradeDTO(
                commodity=SEED_COMMODITY,
                quantity=SEED_QUANTITY,
                price=SEED_PRICE,
                trade_date=datetime.now(timezone.utc) - SEED_AGE,
                counterparty=SEED_COUNTERPARTY,
            )
        )
        logger.info(f"🌱 Seed trade created with id={seeded.id}")
        return seeded

    # ------------------------
    # HELPERS
    # ------------------------

    @staticmethod
    def _column_values(trade: TradeDTO) -> dict:
        return {
            "commodity": trade.commodity,
            "quantity": trade.quantity,
            "price": trade.price,
            "trade_date": trade.trade_date,
            "counterparty": trade.counterparty,
        }

    @staticmethod
    def _model_to_dto(model: TradeModel) -> TradeDTO:
        return TradeDTO(
            id=model.id,
            commodity=model.commodity,
            quantity=model.quantity,
            price=model.price,
            trade_date=model.trade_date,
            counterparty=model.counterparty,
        )
