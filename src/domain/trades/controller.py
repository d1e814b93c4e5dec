from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from dependency_injector.wiring import inject, Provide

from src.commons.decimal_json import DecimalJSONResponse, DecimalJSONRoute
from src.domain.trades.dtos.trade_dto import TradeDTO
from src.domain.trades.trades_service import TradesService
from src.domain.trades.trades_module import TradesModule


# TradeNotFoundError and TradeIdMismatchError raised by the service are
# turned into 404 / 400 by the handlers in src.application.error_handlers.
# Handlers return DecimalJSONResponse themselves so quantity and price are
# written as exact numbers; response_model only documents the shape.
router = APIRouter(prefix="/trades", tags=["trades"], route_class=DecimalJSONRoute)


@router.get("", response_model=List[TradeDTO], response_class=DecimalJSONResponse,
            summary="List trades, latest first")
@inject
async def list_trades(service: TradesService = Depends(Provide[TradesModule.service]),
                      ) -> DecimalJSONResponse:
    trades = await service.list_trades()
    return DecimalJSONResponse(content=[t.to_wire() for t in trades])


@router.get("/{trade_id}", response_model=TradeDTO, response_class=DecimalJSONResponse,
            summary="Get a trade by id")
@inject
async def get_trade(trade_id: int,
                    service: TradesService = Depends(Provide[TradesModule.service]),
                    ) -> DecimalJSONResponse:
    trade = await service.get_trade(trade_id)
    return DecimalJSONResponse(content=trade.to_wire())


@router.post("", response_model=TradeDTO, response_class=DecimalJSONResponse,
             status_code=status.HTTP_201_CREATED, summary="Create a trade")
@inject
async def create_trade(trade: TradeDTO,
                       request: Request,
                       service: TradesService = Depends(Provide[TradesModule.service]),
                       ) -> DecimalJSONResponse:
    created = await service.create_trade(trade)
    return DecimalJSONResponse(
        content=created.to_wire(),
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(request.url_for("get_trade", trade_id=created.id))},
    )


@router.put("/{trade_id}", status_code=status.HTTP_204_NO_CONTENT,
            response_class=Response, summary="Replace a trade")
@inject
async def update_trade(trade_id: int,
                       trade: TradeDTO,
                       service: TradesService = Depends(Provide[TradesModule.service]),
                       ) -> Response:
    await service.update_trade(trade_id, trade)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{trade_id}", status_code=status.HTTP_204_NO_CONTENT,
               response_class=Response, summary="Delete a trade")
@inject
async def delete_trade(trade_id: int,
                       service: TradesService = Depends(Provide[TradesModule.service]),
                       ) -> Response:
    await service.delete_trade(trade_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
