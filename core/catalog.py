"""In-memory dish catalogue used by the storefront."""

from __future__ import annotations

import logging
import random
import re
from pathlib import Path
from typing import Callable, MutableMapping
from urllib.parse import quote

from core.dish_search import search_dishes
from core.errors import GamelleError
from core.idea_generator import generate_ideas
from core.models import Cook, Dish, GeneratedIdea, GroundingChunk, SearchResult

logger = logging.getLogger(__name__)

AVATAR_URL = "https://i.pravatar.cc/150?u={seed}"
IMAGE_URL = "https://source.unsplash.com/400x300/?{keywords},food"


def load_dishes(path: str | Path) -> list[Dish]:
    dishes = Dish.from_json(path)
    logger.info("Loaded %d dishes from %s", len(dishes), path)
    return dishes


def validate_listing(name: str, description: str, price: str, cook_name: str) -> str | None:
    """Return a user-facing error for an incomplete listing, or None."""
    if not name.strip() or not description.strip() or not str(price).strip() or not cook_name.strip():
        return "Veuillez remplir tous les champs avant de publier."
    try:
        value = float(str(price).replace(",", "."))
    except ValueError:
        return "Le prix doit être un nombre."
    if value <= 0:
        return "Le prix doit être supérieur à zéro."
    return None


def add_dish(
    dishes: list[Dish],
    name: str,
    description: str,
    price: float,
    cuisine: str,
    cook_name: str,
    rng: random.Random | None = None,
) -> list[Dish]:
    """Return a new catalogue with the listing prepended (newest first).

    The id is ``len(dishes) + 1``; rating and review count are seeded
    randomly for display.
    """
    rng = rng or random.Random()
    dish = Dish(
        id=len(dishes) + 1,
        name=name,
        description=description,
        price=float(price),
        cuisine=cuisine,
        cook=Cook(
            name=cook_name,
            avatar_url=AVATAR_URL.format(seed=quote(re.sub(r"\s", "", cook_name), safe="")),
        ),
        image_url=IMAGE_URL.format(keywords=quote(",".join(name.split(" ")), safe="")),
        rating=f"{rng.uniform(4.0, 5.0):.1f}",
        reviews=rng.randint(1, 50),
    )
    logger.info("Added dish id=%d (%s) by %s", dish.id, dish.name, cook_name)
    return [dish, *dishes]


def filter_dishes(dishes: list[Dish], matched_ids: list[int] | None) -> list[Dish]:
    """None means no filter; otherwise keep catalogue order."""
    if matched_ids is None:
        return list(dishes)
    wanted = set(matched_ids)
    return [d for d in dishes if d.id in wanted]


def run_search(
    query: str,
    dishes: list[Dish],
    search: Callable[[str, list[Dish]], SearchResult] = search_dishes,
) -> tuple[list[int] | None, list[GroundingChunk], str]:
    """Run a storefront search, returning (ids, citations, error message).

    Empty queries clear the filter without calling the AI service.
    """
    if not query or not query.strip():
        return None, [], ""
    try:
        result = search(query.strip(), dishes)
    except GamelleError as e:
        logger.error("Search failed: %s", e)
        return [], [], f"Erreur de recherche : {e.user_message}"
    return result.matched_ids, result.citations, ""


IDEAS_ERROR = "Une erreur est survenue lors de la génération des idées. Veuillez réessayer."
IDEAS_MISSING_FIELDS = "Veuillez renseigner les ingrédients principaux et le type de cuisine."


def begin_idea_request(state: MutableMapping) -> bool:
    """Mark an idea request as in flight; False if one already is."""
    if state.get("generating"):
        logger.info("Idea request ignored, another one is in flight")
        return False
    state["generating"] = True
    return True


def run_idea_request(
    state: MutableMapping,
    ingredients: str,
    cuisine: str,
    generate: Callable[[str, str], list[GeneratedIdea]] = generate_ideas,
) -> None:
    """Fill ``state["ideas"]``/``state["ideas_error"]`` from one idea request.

    Expects ``begin_idea_request`` to have set ``state["generating"]``; the
    flag is cleared whatever the outcome.
    """
    try:
        if not ingredients.strip() or not cuisine.strip():
            state["ideas_error"] = IDEAS_MISSING_FIELDS
            return
        state["ideas_error"] = ""
        state["ideas"] = []
        state["ideas"] = generate(ingredients.strip(), cuisine.strip())
    except GamelleError as e:
        logger.error("Idea generation failed: %s", e)
        state["ideas_error"] = IDEAS_ERROR
    finally:
        state["generating"] = False
