"""Extraction of matched dish ids and grounding citations from Gemini replies."""

from __future__ import annotations

import logging
import re
from typing import Any, Protocol

from core.models import GroundingChunk

logger = logging.getLogger(__name__)

MATCHING_IDS_RE = re.compile(r"MATCHING_IDS:\s*\[(.*?)\]")
_INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")


class MatchParser(Protocol):
    """Turns the model's free-text reply into a list of dish ids."""

    def parse(self, text: str) -> list[int]:
        ...


class SentinelLineParser:
    """Reads the first ``MATCHING_IDS: [...]`` line of a reply.

    Each token keeps its leading integer (``3abc`` reads as 3); tokens with
    no leading integer are dropped without raising. A reply with no
    sentinel line yields no ids.
    """

    pattern = MATCHING_IDS_RE

    def parse(self, text: str) -> list[int]:
        match = self.pattern.search(text or "")
        if not match:
            logger.info("No MATCHING_IDS line in search reply")
            return []

        inner = match.group(1).strip()
        if not inner:
            return []

        ids: list[int] = []
        for token in inner.split(","):
            token = token.strip()
            prefix = _INT_PREFIX_RE.match(token)
            if prefix:
                ids.append(int(prefix.group(1)))
            else:
                logger.debug("Dropping non-integer id token %r", token)
        return ids


def extract_matching_ids(text: str) -> list[int]:
    return SentinelLineParser().parse(text)


def extract_citations(response: Any) -> list[GroundingChunk]:
    """Collect web citations from the first candidate's grounding metadata.

    Chunks without a non-empty ``web.uri`` are skipped.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []

    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    citations: list[GroundingChunk] = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        uri = getattr(web, "uri", None)
        if not isinstance(uri, str) or not uri:
            continue
        title = getattr(web, "title", None)
        citations.append(GroundingChunk(uri=uri, title=title if isinstance(title, str) else ""))
    return citations
