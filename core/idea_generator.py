"""Dish name/description suggestions from Gemini structured output."""

from __future__ import annotations

import json
import logging

from core.ai_client import get_client
from core.config import GamelleConfig
from core.errors import EmptyResponseError, ParseError, RemoteCallError
from core.models import GeneratedIdea
from core.prompt_builder import build_ideas_prompt
from prompts.templates import IDEAS_RESPONSE_SCHEMA

logger = logging.getLogger(__name__)


def parse_ideas(text: str) -> list[GeneratedIdea]:
    """Parse a schema-constrained reply into ideas, keeping the reply's order."""
    try:
        payload = json.loads(text)
        suggestions = payload["suggestions"]
        if not isinstance(suggestions, list):
            raise ValueError("suggestions must be an array")
        return [GeneratedIdea.from_dict(item) for item in suggestions]
    except (ValueError, KeyError, TypeError) as e:
        raise ParseError(f"Unexpected ideas reply: {e}") from e


def generate_ideas(
    ingredients: str,
    cuisine: str,
    client=None,
    config: GamelleConfig | None = None,
) -> list[GeneratedIdea]:
    """Ask Gemini for dish ideas matching the ingredients and cuisine.

    Makes exactly one remote call. Raises ConfigurationError when no key is
    set, otherwise a GenerationError subclass on any failure.
    """
    if not ingredients or not ingredients.strip() or not cuisine or not cuisine.strip():
        raise ValueError("ingredients and cuisine are required")

    from google.genai import types

    config = config or GamelleConfig.from_env()
    client = client or get_client()
    prompt = build_ideas_prompt(ingredients, cuisine)

    logger.info("Requesting dish ideas via model=%s (cuisine=%s)", config.model, cuisine)
    try:
        response = client.models.generate_content(
            model=config.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=IDEAS_RESPONSE_SCHEMA,
                temperature=config.ideas_temperature,
            ),
        )
    except Exception as e:
        logger.error("Error generating dish ideas: %s", e)
        raise RemoteCallError(str(e)) from e

    text = (response.text or "").strip()
    if not text:
        logger.error("Gemini returned an empty ideas reply")
        raise EmptyResponseError("API returned an empty response.")

    ideas = parse_ideas(text)
    logger.info("Received %d dish ideas", len(ideas))
    return ideas
