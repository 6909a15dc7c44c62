from unittest.mock import MagicMock

import pytest

from conftest import make_response, web_chunk
from core.config import GamelleConfig
from core.dish_search import search_dishes
from core.errors import ConfigurationError, EmptyResponseError, RemoteCallError
from core.models import GroundingChunk
from core.prompt_builder import build_search_prompt, format_dish_line

CONFIG = GamelleConfig()


def _client_returning(response):
    client = MagicMock()
    client.models.generate_content.return_value = response
    return client


def test_format_dish_line(dishes):
    assert format_dish_line(dishes[0]) == (
        "- ID 3: Lasagnes al Forno (Italienne) - Pâtes fraîches et béchamel"
    )


def test_search_prompt_lists_every_dish(dishes):
    prompt = build_search_prompt("quelque chose de crémeux", dishes)

    assert 'A user is searching for: "quelque chose de crémeux".' in prompt
    for dish in dishes:
        assert format_dish_line(dish) in prompt
    assert "MATCHING_IDS: [id1, id2, id3]" in prompt


def test_search_returns_ids_and_citations(dishes):
    response = make_response(
        "MATCHING_IDS: [3, 1]",
        chunks=[web_chunk("https://example.com/a", "A"), web_chunk(None, "B")],
    )
    client = _client_returning(response)

    result = search_dishes("cheesy", dishes, client=client, config=CONFIG)

    assert result.matched_ids == [3, 1]
    assert result.citations == [GroundingChunk(uri="https://example.com/a", title="A")]
    client.models.generate_content.assert_called_once()


def test_search_enables_google_search_tool(dishes):
    client = _client_returning(make_response("MATCHING_IDS: []"))

    search_dishes("tendance 2026", dishes, client=client, config=CONFIG)

    config = client.models.generate_content.call_args.kwargs["config"]
    assert config.temperature == 0.2
    assert len(config.tools) == 1
    assert config.tools[0].google_search is not None


def test_search_without_grounding(dishes):
    client = _client_returning(make_response("MATCHING_IDS: [2]"))

    result = search_dishes("curry", dishes, client=client, config=GamelleConfig(search_grounding=False))

    assert result.matched_ids == [2]
    assert not client.models.generate_content.call_args.kwargs["config"].tools


def test_search_uses_custom_parser(dishes):
    parser = MagicMock()
    parser.parse.return_value = [42]
    client = _client_returning(make_response("whatever"))

    result = search_dishes("x", dishes, client=client, config=CONFIG, parser=parser)

    assert result.matched_ids == [42]
    parser.parse.assert_called_once_with("whatever")


def test_reply_without_sentinel_matches_nothing(dishes):
    client = _client_returning(make_response("Désolé, je ne sais pas."))
    assert search_dishes("x", dishes, client=client, config=CONFIG).matched_ids == []


def test_empty_query_is_rejected(dishes):
    client = MagicMock()
    with pytest.raises(ValueError):
        search_dishes("   ", dishes, client=client, config=CONFIG)
    client.models.generate_content.assert_not_called()


def test_missing_key_fails_before_any_call(dishes, monkeypatch):
    fake_client_cls = MagicMock()
    monkeypatch.setattr("google.genai.Client", fake_client_cls)

    with pytest.raises(ConfigurationError):
        search_dishes("curry", dishes, config=CONFIG)

    fake_client_cls.assert_not_called()


def test_remote_failure(dishes):
    client = MagicMock()
    client.models.generate_content.side_effect = ConnectionError("reset")

    with pytest.raises(RemoteCallError):
        search_dishes("curry", dishes, client=client, config=CONFIG)


def test_empty_reply(dishes):
    client = _client_returning(make_response(""))
    with pytest.raises(EmptyResponseError):
        search_dishes("curry", dishes, client=client, config=CONFIG)
