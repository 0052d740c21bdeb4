"""OpenAI Responses API client for the recipe assistant."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from recipe_finder.services.assistant import AssistantClient


@dataclass
class OpenAIAssistantClient(AssistantClient):
    """Assistant client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(
        cls, api_key: str, base_url: str | None = None
    ) -> "OpenAIAssistantClient":
        """Create an OpenAI assistant client."""
        return cls(client=AsyncOpenAI(api_key=api_key, base_url=base_url))

    async def complete_json(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        instructions: str,
        prompt: str,
        schema_name: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        request_payload: dict[str, object] = {
            "model": model,
            "instructions": instructions,
            "input": [
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "strict": True,
                    "schema": schema,
                }
            },
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(output_text)

    async def close(self) -> None:
        """Close the underlying OpenAI client."""
        await self.client.close()
