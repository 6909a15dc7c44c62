"""Prompt builder that turns storefront data into Gemini prompts."""

from __future__ import annotations

import logging

from core.models import Dish
from prompts.templates import DISH_LINE, IDEAS_PROMPT, SEARCH_PROMPT

logger = logging.getLogger(__name__)


def build_ideas_prompt(ingredients: str, cuisine: str) -> str:
    """Build the idea-generation prompt; both fields are embedded verbatim."""
    prompt = IDEAS_PROMPT.safe_substitute(ingredients=ingredients, cuisine=cuisine)
    logger.debug("Built ideas prompt (%d chars)", len(prompt))
    return prompt


def format_dish_line(dish: Dish) -> str:
    return DISH_LINE.safe_substitute(
        id=dish.id,
        name=dish.name,
        cuisine=dish.cuisine,
        description=dish.description,
    )


def build_search_prompt(query: str, dishes: list[Dish]) -> str:
    """Build the search prompt listing every dish, one per line."""
    dish_list = "\n".join(format_dish_line(d) for d in dishes)
    prompt = SEARCH_PROMPT.safe_substitute(query=query, dish_list=dish_list)
    logger.debug("Built search prompt for %d dishes (%d chars)", len(dishes), len(prompt))
    return prompt
