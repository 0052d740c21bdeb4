"""Intent resolution with a keyword heuristic fallback."""

from dataclasses import dataclass

from recipe_finder.domain.intents import Intent
from recipe_finder.services.assistant import AssistantService
from recipe_finder.services.fallback import with_fallback

_PLAN_MARKERS = ("plan", "schedule")
_RANDOM_MARKER = "random"


def heuristic_intent(query: str) -> Intent:
    """Resolve an intent from keywords alone.

    Categories are never detected here; a query like "Seafood" becomes a
    name search.
    """
    lowered = query.lower()
    if any(marker in lowered for marker in _PLAN_MARKERS):
        return Intent(type="plan", keyword=query)
    if _RANDOM_MARKER in lowered:
        return Intent(type="random")
    return Intent(type="search", keyword=query)


@dataclass
class IntentResolver:
    """Resolves queries through the assistant, else the heuristic."""

    assistant: AssistantService

    async def resolve(self, query: str) -> Intent:
        """Return the intent for a free-text query."""
        return await with_fallback(
            lambda: self.assistant.classify_intent(query),
            lambda: heuristic_intent(query),
            action="Intent classification",
        )
