"""Vercel serverless entrypoint exposing dish idea generation.

Route ``/generate-ideas`` here. The handler only accepts POST with a JSON
body ``{"ingredients": ..., "cuisine": ...}`` and answers with the
suggestions produced by Gemini.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.errors import ConfigurationError, MissingCredentialError
from core.idea_generator import generate_ideas

load_dotenv()
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = {"error": "Only POST requests are allowed."}
BAD_REQUEST = {"error": "Missing ingredients or cuisine in request body."}
SERVER_ERROR = {"error": "Failed to generate ideas."}


def _response(status: int, body: dict) -> dict:
    return {
        "statusCode": status,
        "headers": {"content-type": "application/json"},
        "body": json.dumps(body, ensure_ascii=False),
    }


def _read_body(request) -> dict:
    try:
        body = request.get_json()
    except (ValueError, TypeError):
        return {}
    return body if isinstance(body, dict) else {}


def handler(request, client=None):
    """Vercel Python serverless function handler."""
    if getattr(request, "method", "").upper() != "POST":
        return _response(405, METHOD_NOT_ALLOWED)

    body = _read_body(request)
    ingredients = body.get("ingredients")
    cuisine = body.get("cuisine")
    if not isinstance(ingredients, str) or not isinstance(cuisine, str) \
            or not ingredients.strip() or not cuisine.strip():
        return _response(400, BAD_REQUEST)

    try:
        ideas = generate_ideas(ingredients, cuisine, client=client)
    except MissingCredentialError:
        logger.error("API_KEY environment variable not set on the server.")
        return _response(500, SERVER_ERROR)
    except ConfigurationError as e:
        logger.error("Invalid server configuration: %s", e)
        return _response(500, SERVER_ERROR)
    except Exception:
        logger.exception("Error in generate-ideas function")
        return _response(500, SERVER_ERROR)

    return _response(200, {"suggestions": [idea.to_dict() for idea in ideas]})
