from fastapi import APIRouter

from app.alerts.schemas import AlertCheck, PriceAlert, PriceAlertCreate, PriceCheck
from app.dependencies import AlertServiceDep

router = APIRouter()


@router.get("/{exchange}/{symbol}", response_model=PriceAlert)
async def get_alert(exchange: str, symbol: str, service: AlertServiceDep) -> PriceAlert:
    return await service.get_alert(exchange, symbol)


@router.put("/{exchange}/{symbol}", response_model=PriceAlert)
async def set_alert(
    exchange: str, symbol: str, data: PriceAlertCreate, service: AlertServiceDep
) -> PriceAlert:
    return await service.set_alert(exchange, symbol, data)


@router.delete("/{exchange}/{symbol}", status_code=204)
async def remove_alert(exchange: str, symbol: str, service: AlertServiceDep) -> None:
    await service.remove_alert(exchange, symbol)


@router.post("/{exchange}/{symbol}/check", response_model=AlertCheck)
async def check_alert(
    exchange: str, symbol: str, data: PriceCheck, service: AlertServiceDep
) -> AlertCheck:
    return await service.check_alert(exchange, symbol, data.current_price)
