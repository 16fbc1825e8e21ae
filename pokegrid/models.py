from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

TYPE_TAGS: Tuple[str, ...] = (
    "normal",
    "fire",
    "water",
    "electric",
    "grass",
    "ice",
    "fighting",
    "poison",
    "ground",
    "flying",
    "psychic",
    "bug",
    "rock",
    "ghost",
    "dragon",
    "dark",
    "steel",
    "fairy",
)
ALL_TYPES = "all"


class SortKey(str, Enum):
    ID_ASC = "id-asc"
    ID_DESC = "id-desc"
    EXP_ASC = "exp-asc"
    EXP_DESC = "exp-desc"

    @classmethod
    def parse(cls, value: object) -> "SortKey":
        """Map a raw sort option to a key; unknown values fall back to id-asc."""
        if isinstance(value, cls):
            return value
        raw = str(value or "").strip().lower()
        if raw.startswith("base-"):
            raw = raw[len("base-"):]
        try:
            return cls(raw)
        except ValueError:
            return cls.ID_ASC

    @property
    def descending(self) -> bool:
        return self in (SortKey.ID_DESC, SortKey.EXP_DESC)


class BaseListEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    url: str = Field(min_length=1)

    @property
    def detail_url(self) -> str:
        return self.url


class Ability(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    is_hidden: bool = False

    @property
    def display_name(self) -> str:
        return self.name.replace("-", " ").title()


class Stat(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    base_value: int

    @property
    def display_name(self) -> str:
        labels = {"hp": "HP", "special-attack": "Sp. Atk", "special-defense": "Sp. Def"}
        return labels.get(self.name, self.name.replace("-", " ").title())


class Record(BaseModel):
    """One fully detailed Pokémon, as fetched from its detail endpoint."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    base_experience: int | None = Field(default=None, ge=0)
    height: int = 0
    weight: int = 0
    types: Tuple[str, ...] = Field(min_length=1)
    abilities: Tuple[Ability, ...] = ()
    stats: Tuple[Stat, ...] = ()
    sprite_url: str = ""
    artwork_url: str | None = None

    @field_validator("types")
    @classmethod
    def _known_types(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        unknown = [t for t in value if t not in TYPE_TAGS]
        if unknown:
            raise ValueError(f"unknown type(s): {', '.join(unknown)}")
        return value

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def dex_number(self) -> str:
        return f"#{self.id:03d}"

    @property
    def image_url(self) -> str:
        return self.artwork_url or self.sprite_url

    @property
    def primary_type(self) -> str:
        return self.types[0]

    @property
    def experience(self) -> int:
        return self.base_experience or 0

    @property
    def total_stats(self) -> int:
        return sum(stat.base_value for stat in self.stats)


class QueryState(BaseModel):
    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    selected_type: str = ALL_TYPES
    sort_key: SortKey = SortKey.ID_ASC

    @field_validator("selected_type")
    @classmethod
    def _known_filter_type(cls, value: str) -> str:
        value = (value or ALL_TYPES).lower()
        if value != ALL_TYPES and value not in TYPE_TAGS:
            raise ValueError(f"unknown type filter: {value}")
        return value

    @field_validator("sort_key", mode="before")
    @classmethod
    def _parse_sort_key(cls, value: object) -> SortKey:
        return SortKey.parse(value)
