"""Prompt template for the market sentiment analysis."""

SENTIMENT_ANALYSIS_PROMPT = """Act as an expert financial market analyst.
For the company or stock symbol "{symbol}" listed on the "{exchange}" stock exchange, \
perform a detailed sentiment analysis based on the latest market news, social media \
trends and recent financial reports. Your analysis MUST also incorporate key technical \
indicators. Use web search to find up-to-date information.

Your entire response MUST be a single JSON object and nothing else. Do not wrap it in markdown.
The JSON object must conform to this structure:
{{
  "companyName": "string",
  "stockSymbol": "string",
  "overallSentiment": "Positive" | "Neutral" | "Negative",
  "sentimentScore": number,
  "summary": "string",
  "positivePoints": [ {{ "point": "string", "reason": "string" }} ],
  "negativePoints": [ {{ "point": "string", "reason": "string" }} ],
  "currentPrice": number,
  "fiftyTwoWeekHigh": number,
  "fiftyTwoWeekLow": number,
  "currentVolume": number,
  "averageVolume": number,
  "currencySymbol": "string",
  "recommendation": "Buy" | "Hold" | "Sell",
  "recommendationSummary": "string",
  "aspectSentiment": {{
    "financials": number,
    "product": number | null,
    "management": number,
    "marketPosition": number
  }},
  "newsArticles": [ {{ "title": "string", "snippet": "string", "uri": "string" }} ],
  "historicalData": [
    {{
      "date": "YYYY-MM",
      "price": number | null,
      "volume": number | null,
      "sentimentScore": number | null,
      "ma50": number | null,
      "ma200": number | null,
      "rsi14": number | null
    }}
  ],
  "technicalIndicators": {{
    "movingAverage50": number,
    "movingAverage200": number,
    "rsi14": number
  }}
}}

Important instructions:
- "sentimentScore" and every "aspectSentiment" score must be between -1.0 and 1.0.
- "summary" MUST be concise and highlight the main drivers of the score.
- "recommendationSummary" MUST be a single, brief sentence explaining the recommendation.
- Every "positivePoints" and "negativePoints" entry needs a descriptive "reason".
- All monetary values must be in the exchange's local currency and "currencySymbol" \
must match it (e.g. "₹" for INR, "$" for USD).
- "newsArticles" lists the 5 most recent relevant articles with a 1-2 sentence snippet \
and the direct URL.
- "historicalData" must hold 12 objects, one per month for the last 12 months, oldest \
first. "price" is the monthly closing price; use null for any unavailable value.
- "technicalIndicators" holds the current 50-day MA, 200-day MA and 14-day RSI."""


def build_sentiment_prompt(symbol: str, exchange: str) -> str:
    return SENTIMENT_ANALYSIS_PROMPT.format(symbol=symbol, exchange=exchange)
