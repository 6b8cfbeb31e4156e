"""
Month-over-month KPI review by Gemini.

One request, one JSON answer: four anomaly flags and a short insights text.
"""
import json
import logging

import google.generativeai as genai
from django.conf import settings
from google.api_core.exceptions import GoogleAPIError

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """You are a hotel management expert analyzing monthly trends in key performance indicators.

Based on the following data, determine if any of the trends are anomalous and require managerial intervention.
Provide insights and recommendations based on your analysis.

Total Revenue: {total_revenue} (Previous Month: {revenue_last_month})
Occupied Rooms: {occupied_rooms} / {total_rooms} (Previous Month: {occupied_rooms_last_month})
Active Guests: {active_guests} (Previous Month: {active_guests_last_month})
Restaurant Orders: {restaurant_orders} (Previous Month: {restaurant_orders_last_month})

Consider factors such as seasonality, local events, and any known changes in hotel operations.
A large change is not necessarily anomalous, especially if the overall values are small.
A small change in a large number may be anomalous.

Answer with a single JSON object with exactly these keys:
"is_anomalous_revenue_trend" (boolean), "is_anomalous_occupancy_trend" (boolean),
"is_anomalous_guest_trend" (boolean), "is_anomalous_restaurant_order_trend" (boolean),
"insights" (string).
"""


class TrendAnalysisError(Exception):
    """Raised when the model call fails or returns something unusable"""


def build_prompt(kpis: dict) -> str:
    return PROMPT_TEMPLATE.format(**kpis)


def analyze_trends(kpis: dict) -> dict:
    """
    Ask the model whether any KPI trend needs attention.

    Returns the decoded JSON object; the caller validates its shape.
    """
    genai.configure(api_key=settings.GEMINI_API_KEY)
    model = genai.GenerativeModel(settings.GEMINI_MODEL)

    try:
        response = model.generate_content(
            contents=build_prompt(kpis),
            generation_config={"response_mime_type": "application/json"},
        )
        return json.loads(response.text)
    except json.JSONDecodeError as e:
        logger.error(f"Trend analysis returned invalid JSON: {e}")
        raise TrendAnalysisError("The model returned an unreadable answer.") from e
    except (GoogleAPIError, ValueError) as e:
        logger.error(f"Trend analysis request failed: {e}")
        raise TrendAnalysisError("Trend analysis is unavailable.") from e
