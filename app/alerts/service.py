import time

import structlog

from app.alerts.repository import AlertRepository, alert_key
from app.alerts.schemas import AlertCheck, AlertType, PriceAlert, PriceAlertCreate
from app.exceptions import NotFoundError

logger = structlog.get_logger()


class AlertService:
    def __init__(self, repo: AlertRepository) -> None:
        self._repo = repo

    async def set_alert(self, exchange: str, symbol: str, data: PriceAlertCreate) -> PriceAlert:
        exchange, symbol = _normalize(exchange, symbol)
        alert = PriceAlert(
            exchange=exchange,
            symbol=symbol,
            target=data.target,
            type=AlertType.ABOVE if data.target > data.current_price else AlertType.BELOW,
            created_at=int(time.time() * 1000),
        )
        await self._repo.put(alert_key(exchange, symbol), alert.model_dump(mode="json"))
        logger.info(
            "alert_set",
            exchange=exchange,
            symbol=symbol,
            target=alert.target,
            type=alert.type,
        )
        return alert

    async def get_alert(self, exchange: str, symbol: str) -> PriceAlert:
        exchange, symbol = _normalize(exchange, symbol)
        key = alert_key(exchange, symbol)
        row = await self._repo.get(key)
        if row is None:
            raise NotFoundError("Price alert", key)
        return PriceAlert.model_validate(row)

    async def remove_alert(self, exchange: str, symbol: str) -> None:
        exchange, symbol = _normalize(exchange, symbol)
        key = alert_key(exchange, symbol)
        if not await self._repo.delete(key):
            raise NotFoundError("Price alert", key)
        logger.info("alert_removed", exchange=exchange, symbol=symbol)

    async def check_alert(self, exchange: str, symbol: str, current_price: float) -> AlertCheck:
        """Evaluate the stored alert against a fresh price; a triggered alert is consumed."""
        exchange, symbol = _normalize(exchange, symbol)
        key = alert_key(exchange, symbol)
        row = await self._repo.get(key)
        if row is None:
            return AlertCheck(triggered=False)

        alert = PriceAlert.model_validate(row)
        triggered = (alert.type == AlertType.ABOVE and current_price >= alert.target) or (
            alert.type == AlertType.BELOW and current_price <= alert.target
        )
        if not triggered:
            return AlertCheck(triggered=False, alert=alert)

        await self._repo.delete(key)
        logger.info(
            "alert_triggered",
            exchange=exchange,
            symbol=symbol,
            target=alert.target,
            current_price=current_price,
        )
        return AlertCheck(
            triggered=True,
            alert=alert,
            message=(
                f"{symbol} price alert triggered: target of {alert.target:,.2f} reached. "
                f"Current price: {current_price:,.2f}."
            ),
        )


def _normalize(exchange: str, symbol: str) -> tuple[str, str]:
    return exchange.strip().upper(), symbol.strip().upper()
