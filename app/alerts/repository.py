import aiosqlite


def alert_key(exchange: str, symbol: str) -> str:
    return f"{exchange}:{symbol}"


class AlertRepository:
    """Key-value store of price alerts keyed by ``"<exchange>:<symbol>"``."""

    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def get(self, key: str) -> dict | None:
        cursor = await self._db.execute(
            "SELECT * FROM price_alerts WHERE key = ?",
            (key,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return dict(row)

    async def put(self, key: str, alert: dict) -> None:
        await self._db.execute(
            """
            INSERT INTO price_alerts (key, exchange, symbol, target, type, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET
                target = excluded.target,
                type = excluded.type,
                created_at = excluded.created_at
            """,
            (
                key,
                alert["exchange"],
                alert["symbol"],
                alert["target"],
                alert["type"],
                alert["created_at"],
            ),
        )
        await self._db.commit()

    async def delete(self, key: str) -> bool:
        cursor = await self._db.execute(
            "DELETE FROM price_alerts WHERE key = ?",
            (key,),
        )
        await self._db.commit()
        return cursor.rowcount > 0
