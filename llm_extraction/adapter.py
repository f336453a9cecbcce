"""Extraction backend adapters.

Provides a base interface and a concrete adapter for OpenAI-compatible
chat completion APIs with structured JSON output.
"""

import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from openai import OpenAI

from llm_extraction.validator import ENVELOPE_KEY, decode_json_payload


class BaseExtractionAdapter(ABC):
    """Abstract base for all extraction backends."""

    @abstractmethod
    def extract(self, prompt: str, schema: Dict[str, Any], text: str) -> Any:
        """Run schema-constrained extraction over `text`.

        Args:
            prompt: Fixed instruction set (system prompt).
            schema: JSON schema describing the expected array output.
            text: Preprocessed page content.

        Returns:
            Decoded JSON, expected to be an array of row objects.
        """


class OpenAIExtractionAdapter(BaseExtractionAdapter):
    """Adapter for OpenAI-compatible chat completion APIs.

    Uses JSON-schema structured outputs at temperature 0. The array schema
    is wrapped in an object because the API requires an object root.
    """

    def __init__(
        self,
        model: str = "gpt-4o-mini",
        max_tokens: int = 4096,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_seconds: float = 60.0,
    ) -> None:
        """Initialise the OpenAI adapter.

        Args:
            model: Model identifier.
            max_tokens: Maximum tokens in the completion.
            api_key: API key. Falls back to OPENAI_API_KEY env var.
            base_url: Optional base URL for OpenAI-compatible endpoints.
            timeout_seconds: Request timeout; the call is never retried here.
        """
        resolved_key = api_key or os.environ.get("OPENAI_API_KEY", "")
        client_kwargs: dict = {
            "api_key": resolved_key,
            "timeout": timeout_seconds,
            "max_retries": 0,
        }
        if base_url:
            client_kwargs["base_url"] = base_url

        self._client = OpenAI(**client_kwargs)
        self._model = model
        self._max_tokens = max_tokens

    def extract(self, prompt: str, schema: Dict[str, Any], text: str) -> Any:
        """Call the chat completion API and decode its JSON content."""
        response = self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": prompt},
                {"role": "user", "content": text},
            ],
            temperature=0,
            top_p=1,
            max_tokens=self._max_tokens,
            stream=False,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": "display_board_entries",
                    "schema": {
                        "type": "object",
                        "properties": {ENVELOPE_KEY: schema},
                        "required": [ENVELOPE_KEY],
                    },
                    "strict": False,
                },
            },
        )
        content = response.choices[0].message.content or ""
        return decode_json_payload(content)
