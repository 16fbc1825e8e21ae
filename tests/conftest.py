"""Pytest configuration and fixtures."""

from typing import Dict, List, Sequence

import pytest

from pokegrid.models import Ability, Record, Stat


def build_record(
    pid: int,
    name: str,
    types: Sequence[str] = ("normal",),
    base_experience: int | None = 64,
) -> Record:
    return Record(
        id=pid,
        name=name,
        base_experience=base_experience,
        height=7,
        weight=69,
        types=tuple(types),
        abilities=(Ability(name="overgrow"), Ability(name="chlorophyll", is_hidden=True)),
        stats=(Stat(name="hp", base_value=45), Stat(name="attack", base_value=49)),
        sprite_url=f"https://sprites.example/{pid}.png",
        artwork_url=f"https://artwork.example/{pid}.png",
    )


@pytest.fixture
def make_record():
    return build_record


@pytest.fixture
def numbered_records() -> List[Record]:
    """151 records with ids 1..151."""
    return [build_record(i, f"mon{i:03d}") for i in range(1, 152)]


def detail_payload(pid: int, name: str, types: Sequence[str] = ("grass", "poison")) -> Dict:
    return {
        "id": pid,
        "name": name,
        "base_experience": 64,
        "height": 7,
        "weight": 69,
        "types": [
            {"slot": slot, "type": {"name": t, "url": f"https://pokeapi.co/api/v2/type/{t}/"}}
            for slot, t in reversed(list(enumerate(types, start=1)))
        ],
        "abilities": [
            {"ability": {"name": "overgrow"}, "is_hidden": False, "slot": 1},
            {"ability": {"name": "chlorophyll"}, "is_hidden": True, "slot": 3},
        ],
        "stats": [
            {"base_stat": 45, "effort": 0, "stat": {"name": "hp"}},
            {"base_stat": 49, "effort": 0, "stat": {"name": "attack"}},
        ],
        "sprites": {
            "front_default": f"https://sprites.example/{pid}.png",
            "other": {"official-artwork": {"front_default": f"https://artwork.example/{pid}.png"}},
        },
    }


@pytest.fixture
def bulbasaur_payload() -> Dict:
    return detail_payload(1, "bulbasaur")


@pytest.fixture
def make_payload():
    return detail_payload
