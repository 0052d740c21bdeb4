"""Models for resolved user intents."""

from typing import Literal

from pydantic import BaseModel

IntentType = Literal["search", "category", "random", "plan", "none"]


class Intent(BaseModel):
    """What a free-text query asks for, with an optional keyword."""

    type: IntentType
    keyword: str | None = None
    thinking: str | None = None
