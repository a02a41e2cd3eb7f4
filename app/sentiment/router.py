from fastapi import APIRouter

from app.dependencies import SentimentServiceDep
from app.sentiment.analytics import build_chart_data
from app.sentiment.schemas import ChartData, SentimentAnalysis

router = APIRouter()


@router.post("/charts", response_model=ChartData)
async def chart_data(analysis: SentimentAnalysis) -> ChartData:
    return build_chart_data(analysis)


@router.get("/{symbol}", response_model=SentimentAnalysis)
async def analyze_sentiment(
    symbol: str, service: SentimentServiceDep, exchange: str = "NASDAQ"
) -> SentimentAnalysis:
    return await service.analyze(symbol, exchange)
