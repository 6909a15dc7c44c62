"""Data models for the Gamelle storefront."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class Cook:
    name: str
    avatar_url: str = ""


@dataclass
class Dish:
    id: int
    name: str
    description: str
    price: float
    cuisine: str
    cook: Cook
    image_url: str = ""
    rating: str = "4.5"
    reviews: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Dish:
        cook = data.get("cook") or {}
        return cls(
            id=int(data["id"]),
            name=data["name"],
            description=data.get("description", ""),
            price=float(data.get("price", 0.0)),
            cuisine=data.get("cuisine", ""),
            cook=Cook(
                name=cook.get("name", ""),
                avatar_url=cook.get("avatarUrl", cook.get("avatar_url", "")),
            ),
            image_url=data.get("imageUrl", data.get("image_url", "")),
            rating=str(data.get("rating", "4.5")),
            reviews=int(data.get("reviews", 0)),
        )

    @classmethod
    def from_json(cls, path: str | Path) -> list[Dish]:
        """Load dishes from a JSON file (a list, or an object with a "dishes" key)."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        items = data if isinstance(data, list) else data.get("dishes", [])
        return [cls.from_dict(item) for item in items]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class GeneratedIdea:
    nom_plat: str
    description_plat: str

    @classmethod
    def from_dict(cls, data: Any) -> GeneratedIdea:
        """Build an idea from one schema item; raises ValueError on a bad shape."""
        if not isinstance(data, dict):
            raise ValueError(f"suggestion must be an object, got {type(data).__name__}")
        name = data.get("nom_plat")
        description = data.get("description_plat")
        if not isinstance(name, str) or not isinstance(description, str):
            raise ValueError("suggestion requires string fields nom_plat and description_plat")
        return cls(nom_plat=name, description_plat=description)

    def to_dict(self) -> dict[str, str]:
        return {"nom_plat": self.nom_plat, "description_plat": self.description_plat}


@dataclass
class GroundingChunk:
    uri: str
    title: str = ""


@dataclass
class SearchResult:
    matched_ids: list[int] = field(default_factory=list)
    citations: list[GroundingChunk] = field(default_factory=list)
