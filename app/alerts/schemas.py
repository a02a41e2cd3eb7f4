from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AlertType(StrEnum):
    ABOVE = "above"
    BELOW = "below"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PriceAlertCreate(_CamelModel):
    target: float = Field(gt=0)
    current_price: float = Field(gt=0)


class PriceCheck(_CamelModel):
    current_price: float = Field(gt=0)


class PriceAlert(_CamelModel):
    exchange: str
    symbol: str
    target: float
    type: AlertType
    created_at: int  # epoch millis


class AlertCheck(_CamelModel):
    triggered: bool
    alert: PriceAlert | None = None
    message: str | None = None
