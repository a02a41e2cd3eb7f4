from typing import Annotated

from fastapi import Depends

from app.alerts.repository import AlertRepository
from app.alerts.service import AlertService
from app.database import get_db
from app.sentiment.service import SentimentService


def get_sentiment_service() -> SentimentService:
    from app.llm.factory import LLMFactory

    return SentimentService(LLMFactory.create())


def get_alert_repo() -> AlertRepository:
    return AlertRepository(get_db())


def get_alert_service() -> AlertService:
    return AlertService(get_alert_repo())


SentimentServiceDep = Annotated[SentimentService, Depends(get_sentiment_service)]
AlertServiceDep = Annotated[AlertService, Depends(get_alert_service)]
