from pathlib import Path
from types import SimpleNamespace
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core import ai_client
from core.config import API_KEY_ENV_NAMES
from core.models import Cook, Dish


@pytest.fixture(autouse=True)
def fresh_client(monkeypatch):
    """Every test starts with an uninitialized client and no API key."""
    monkeypatch.setattr(ai_client, "_client", None)
    for name in API_KEY_ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def dishes():
    return [
        Dish(id=3, name="Lasagnes al Forno", description="Pâtes fraîches et béchamel",
             price=12.0, cuisine="Italienne", cook=Cook(name="Marco")),
        Dish(id=2, name="Curry Vert", description="Poulet au lait de coco",
             price=11.0, cuisine="Thaïlandaise", cook=Cook(name="Sirin")),
        Dish(id=1, name="Quiche Lorraine", description="Crème, œufs et lardons",
             price=8.0, cuisine="Française", cook=Cook(name="Paul")),
    ]


def make_response(text, chunks=None):
    metadata = SimpleNamespace(grounding_chunks=chunks)
    return SimpleNamespace(text=text, candidates=[SimpleNamespace(grounding_metadata=metadata)])


def web_chunk(uri, title=None):
    return SimpleNamespace(web=SimpleNamespace(uri=uri, title=title))
