# dubai_horizon/services/itinerary_generator.py
"""AI itinerary suggestions via OpenAI Chat Completions."""

import logging
from functools import lru_cache

from openai import OpenAI, OpenAIError

from dubai_horizon.config import get_openai_chat_model
from dubai_horizon.models.itinerary import ItinerarySuggestionRequest

logger = logging.getLogger(__name__)

BUDGET_HINTS = {
    "low": "budget-friendly options, public transport and free attractions",
    "medium": "a balance of popular paid experiences and good value dining",
    "high": "luxury hotels, fine dining and premium private experiences",
}


class ItineraryGenerationError(Exception):
    """The generative service failed or returned no itinerary."""


def _build_prompt(request: ItinerarySuggestionRequest) -> str:
    return (
        "You are a friendly travel planner for Dubai. "
        f"Create a {request.days}-day itinerary for a traveller interested in: {request.interests}. "
        f"Budget: {request.budget.value}, so favour {BUDGET_HINTS[request.budget.value]}. "
        "Start each day on its own line as 'Day N: <theme>'. Within a day, start each part "
        "of the day on its own line with 'Morning:', 'Afternoon:', 'Lunch:', 'Evening:' or "
        "'Dinner:' followed by the plan. Reply in plain text without markdown."
    )


class ItineraryGenerator:
    """Wraps the OpenAI client; one instance per application."""

    def __init__(self, client=None, model=None):
        self._client = client
        self.model = model or get_openai_chat_model()

    @property
    def client(self):
        if self._client is None:
            # Reads OPENAI_API_KEY from the environment.
            self._client = OpenAI()
        return self._client

    def suggest(self, request: ItinerarySuggestionRequest) -> str:
        """Return the generated itinerary text.

        Raises:
            ItineraryGenerationError: If the API call fails or the reply is empty.
        """
        messages = [
            {"role": "system", "content": "You write clear, practical travel itineraries."},
            {"role": "user", "content": _build_prompt(request)},
        ]
        logger.info("Generating itinerary: days=%d budget=%s", request.days, request.budget.value)
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=0.7,
                max_tokens=2048,
            )
        except OpenAIError as exc:
            logger.error("Failed to generate itinerary: %s", exc)
            raise ItineraryGenerationError(str(exc)) from exc

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            logger.error("Itinerary generation returned an empty reply")
            raise ItineraryGenerationError("The itinerary service returned an empty response.")
        return content.strip()


@lru_cache
def get_itinerary_generator():
    return ItineraryGenerator()
