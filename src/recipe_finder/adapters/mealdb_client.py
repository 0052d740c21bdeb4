"""TheMealDB API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class MealDbClient(Protocol):
    """Interface for TheMealDB API interactions."""

    async def random_meal(self) -> dict[str, object]:
        """Return raw data for one random meal."""

    async def search_meals(self, name: str) -> dict[str, object]:
        """Search meals by name and return raw API data."""

    async def list_categories(self) -> dict[str, object]:
        """Return raw data for all categories."""

    async def filter_by_category(self, category: str) -> dict[str, object]:
        """Return abbreviated meals in a category."""

    async def lookup_meal(self, meal_id: str) -> dict[str, object]:
        """Fetch a meal by id and return raw API data."""


@dataclass
class HttpxMealDbClient(MealDbClient):
    """HTTPX-backed TheMealDB client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 15

    @classmethod
    def create(cls, base_url: str, timeout: float = 15) -> "HttpxMealDbClient":
        """Create a TheMealDB client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient(), timeout=timeout)

    async def random_meal(self) -> dict[str, object]:
        """Fetch one random meal."""
        return await self._get("random.php")

    async def search_meals(self, name: str) -> dict[str, object]:
        """Search meals by name."""
        return await self._get("search.php", params={"s": name})

    async def list_categories(self) -> dict[str, object]:
        """List all meal categories."""
        return await self._get("categories.php")

    async def filter_by_category(self, category: str) -> dict[str, object]:
        """Filter meals by category."""
        return await self._get("filter.php", params={"c": category})

    async def lookup_meal(self, meal_id: str) -> dict[str, object]:
        """Fetch a meal by id."""
        return await self._get("lookup.php", params={"i": meal_id})

    async def _get(
        self, path: str, params: dict[str, str] | None = None
    ) -> dict[str, object]:
        response = await self.http_client.get(
            f"{self.base_url}/{path}",
            params=params,
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
