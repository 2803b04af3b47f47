"""
Tool suggestion service.

Uses Google Gemini with structured JSON output to propose a description,
category and tags for a tool that is being registered.
Every failure degrades to "no suggestion".
"""

import json
from typing import Any, Optional

from google import genai
from google.genai import types
from pydantic import ValidationError

from nexushub.apps.tools.schemas import ToolSuggestion
from nexushub.config.settings import settings
from nexushub.core.constants import CATEGORIES
from nexushub.utils.logger import get_logger
from nexushub.utils.metrics import suggestion_count

logger = get_logger(__name__)

MAX_SUGGESTED_TAGS = 4


class ToolAnalyzer:
    """
    Suggests form values for a new tool from its name and URL.

    Without an API key the analyzer is inert and `analyze` returns None.
    """

    def __init__(self, api_key: str = "", model: Optional[str] = None, client: Any = None):
        self.model = model or settings.GEMINI_MODEL
        if client is None and api_key:
            client = genai.Client(api_key=api_key)
        self.client = client

    @property
    def enabled(self) -> bool:
        return self.client is not None

    async def analyze(self, name: str, url: str) -> Optional[ToolSuggestion]:
        """
        Ask the model for a suggestion.

        Returns:
            ToolSuggestion, or None on missing key, transport failure,
            empty output or output that does not match the schema.
        """
        if not self.enabled:
            logger.warning("API key not found, skipping AI analysis")
            suggestion_count.labels(outcome="skipped").inc()
            return None

        try:
            logger.debug(f"Analyzing tool: name='{name[:50]}', url='{url[:80]}'")
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=self._build_prompt(name, url),
                config=types.GenerateContentConfig(
                    temperature=0.2,
                    response_mime_type="application/json",
                    response_schema=ToolSuggestion,
                )
            )

            if not response.text:
                logger.warning("Empty response from suggestion model")
                suggestion_count.labels(outcome="empty").inc()
                return None

            suggestion = ToolSuggestion(**json.loads(response.text))
            suggestion.tags = [t.strip() for t in suggestion.tags if t.strip()][:MAX_SUGGESTED_TAGS]

            logger.info(
                f"Suggestion for '{name}': category={suggestion.category}, "
                f"tags={suggestion.tags}"
            )
            suggestion_count.labels(outcome="ok").inc()
            return suggestion

        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.error(f"Suggestion model returned malformed output: {e}")
            suggestion_count.labels(outcome="error").inc()
            return None
        except Exception as e:
            logger.error(f"Error analyzing tool with Gemini: {e}")
            suggestion_count.labels(outcome="error").inc()
            return None

    def _build_prompt(self, name: str, url: str) -> str:
        return f"""I am adding a new tool to my organization's dashboard.
The tool name is "{name}" and the URL is "{url}".
Please provide a brief, professional description (max 15 words), a suitable category, and 3-4 relevant short tags.
Prefer one of these categories when it fits: {", ".join(CATEGORIES)}."""
