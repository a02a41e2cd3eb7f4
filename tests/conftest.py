"""Pytest configuration and shared fixtures."""

import copy

import pytest

from app.llm.base import ModelClient, RawModelResponse


class FakeModelClient(ModelClient):
    """Returns a canned response, or raises the configured error."""

    def __init__(self, response: RawModelResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.prompts: list[str] = []

    async def invoke(self, prompt: str) -> RawModelResponse:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def valid_payload() -> dict:
    """A complete analysis payload as the model would return it."""
    months = [f"2024-{m:02d}" for m in range(11, 13)] + [f"2025-{m:02d}" for m in range(1, 11)]
    history = [
        {
            "date": month,
            "price": 150.0 + i * 2,
            "volume": 1_000_000 + i * 10_000,
            "sentimentScore": round(0.1 * (i % 4) - 0.1, 2),
            "ma50": 148.0 + i,
            "ma200": 140.0 + i * 0.5,
            "rsi14": 45.0 + i,
        }
        for i, month in enumerate(months)
    ]
    return {
        "companyName": "Acme Corp",
        "stockSymbol": "ACME",
        "overallSentiment": "Positive",
        "sentimentScore": 0.45,
        "summary": "Positive sentiment is driven by strong earnings.",
        "positivePoints": [
            {"point": "Strong Earnings", "reason": "Revenue grew 20% year over year."},
        ],
        "negativePoints": [
            {"point": "Valuation", "reason": "Trades at a premium to peers."},
        ],
        "currentPrice": 172.5,
        "fiftyTwoWeekHigh": 180.0,
        "fiftyTwoWeekLow": 120.25,
        "currentVolume": 1_200_000,
        "averageVolume": 1_050_000,
        "currencySymbol": "$",
        "recommendation": "Buy",
        "recommendationSummary": "Strong earnings and a bullish setup suggest a Buy.",
        "aspectSentiment": {
            "financials": 0.6,
            "product": 0.4,
            "management": 0.2,
            "marketPosition": 0.5,
        },
        "newsArticles": [
            {
                "title": "Acme beats estimates",
                "snippet": "Acme reported record revenue.",
                "uri": "https://news.example.com/acme-beats",
            },
        ],
        "historicalData": history,
        "technicalIndicators": {
            "movingAverage50": 165.2,
            "movingAverage200": 150.8,
            "rsi14": 58.3,
        },
    }


@pytest.fixture
def payload_factory(valid_payload):
    """Build a payload variant: ``payload_factory(overallSentiment="Bullish")``."""

    def _make(**overrides) -> dict:
        payload = copy.deepcopy(valid_payload)
        for key, value in overrides.items():
            if value is ...:
                payload.pop(key, None)
            else:
                payload[key] = value
        return payload

    return _make


@pytest.fixture
def grounding_metadata() -> dict:
    return {
        "groundingChunks": [
            {"web": {"uri": "https://finance.example.com/acme", "title": "Acme quote"}},
            {"web": {"uri": "https://news.example.com/acme-beats", "title": "Acme beats"}},
        ]
    }


@pytest.fixture
def fake_client():
    """Factory for ``FakeModelClient`` instances."""
    return FakeModelClient
