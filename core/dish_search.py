"""Natural-language search over the dish catalogue."""

from __future__ import annotations

import logging

from core.ai_client import get_client
from core.config import GamelleConfig
from core.errors import EmptyResponseError, RemoteCallError
from core.models import Dish, SearchResult
from core.parsing import MatchParser, SentinelLineParser, extract_citations
from core.prompt_builder import build_search_prompt

logger = logging.getLogger(__name__)


def search_dishes(
    query: str,
    dishes: list[Dish],
    client=None,
    config: GamelleConfig | None = None,
    parser: MatchParser | None = None,
) -> SearchResult:
    """Ask Gemini which dishes match ``query``.

    The caller handles empty queries; one remote call is made per search.
    """
    if not query or not query.strip():
        raise ValueError("query must not be empty")

    from google.genai import types

    config = config or GamelleConfig.from_env()
    client = client or get_client()
    parser = parser or SentinelLineParser()
    prompt = build_search_prompt(query, dishes)

    tools = [types.Tool(google_search=types.GoogleSearch())] if config.search_grounding else None

    logger.info("Searching %d dishes via model=%s", len(dishes), config.model)
    try:
        response = client.models.generate_content(
            model=config.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                tools=tools,
                temperature=config.search_temperature,
            ),
        )
    except Exception as e:
        logger.error("Error searching dishes: %s", e)
        raise RemoteCallError(str(e)) from e

    text = response.text or ""
    if not text.strip():
        logger.error("Gemini returned an empty search reply")
        raise EmptyResponseError("API returned an empty response.")

    result = SearchResult(
        matched_ids=parser.parse(text),
        citations=extract_citations(response),
    )
    logger.info(
        "Search matched %d dishes with %d citations",
        len(result.matched_ids), len(result.citations),
    )
    return result
