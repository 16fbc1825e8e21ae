from __future__ import annotations

from typing import Dict, List, Mapping

import requests
from pydantic import ValidationError

from pokegrid import config
from pokegrid.errors import DetailFetchError, ListFetchError
from pokegrid.log import get_logger
from pokegrid.models import Ability, BaseListEntry, Record, Stat

logger = get_logger(__name__)


def _headers() -> Dict[str, str]:
    return {"User-Agent": config.USER_AGENT, "Accept": "application/json"}


def _get_json(url: str, params: Mapping[str, object] | None = None) -> object:
    logger.debug("GET %s params=%s", url, params)
    resp = requests.get(url, params=params, headers=_headers(), timeout=config.REQUEST_TIMEOUT)
    resp.raise_for_status()
    return resp.json()


def list_url(base: str = config.POKEAPI_BASE) -> str:
    return f"{base.rstrip('/')}/pokemon"


def detail_url_for(name: str, base: str = config.POKEAPI_BASE) -> str:
    return f"{list_url(base)}/{name.strip().lower()}"


def parse_base_list(payload: object) -> List[BaseListEntry]:
    if not isinstance(payload, dict):
        raise ValueError("response is not a JSON object")
    results = payload.get("results")
    if not isinstance(results, list):
        raise ValueError("response has no 'results' list")
    return [BaseListEntry.model_validate(item) for item in results]


def fetch_base_list(limit: int = config.LIST_LIMIT, base: str = config.POKEAPI_BASE) -> List[BaseListEntry]:
    url = list_url(base)
    try:
        payload = _get_json(url, params={"limit": limit})
        entries = parse_base_list(payload)
    except requests.RequestException as exc:
        raise ListFetchError(url, str(exc)) from exc
    except ValueError as exc:
        # Covers JSON decoding and pydantic validation.
        raise ListFetchError(url, f"malformed response: {exc}") from exc
    logger.debug("Base list returned %d entries", len(entries))
    return entries


def _sprites(payload: Mapping[str, object]) -> tuple[str, str | None]:
    sprites = payload.get("sprites") or {}
    front = sprites.get("front_default") or ""
    other = sprites.get("other") or {}
    artwork = (other.get("official-artwork") or {}).get("front_default")
    return str(front), (str(artwork) if artwork else None)


def parse_record(payload: object) -> Record:
    """Turn a /pokemon/{name} payload into a Record.

    Raises ValueError (or pydantic's ValidationError, a subclass) when the
    payload is missing required fields or carries unexpected shapes.
    """
    if not isinstance(payload, dict):
        raise ValueError("response is not a JSON object")
    try:
        type_slots = sorted(payload["types"], key=lambda slot: slot.get("slot", 0))
        types = tuple(slot["type"]["name"] for slot in type_slots)
        abilities = tuple(
            Ability(name=item["ability"]["name"], is_hidden=bool(item.get("is_hidden", False)))
            for item in payload.get("abilities") or []
        )
        stats = tuple(
            Stat(name=item["stat"]["name"], base_value=item["base_stat"])
            for item in payload.get("stats") or []
        )
        sprite_url, artwork_url = _sprites(payload)
        return Record(
            id=payload["id"],
            name=payload["name"],
            base_experience=payload.get("base_experience"),
            height=payload.get("height") or 0,
            weight=payload.get("weight") or 0,
            types=types,
            abilities=abilities,
            stats=stats,
            sprite_url=sprite_url,
            artwork_url=artwork_url,
        )
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"missing or malformed field: {exc}") from exc


def fetch_record(name: str, url: str | None = None) -> Record:
    """Fetch one record by name, or from an explicit detail URL."""
    target = url or detail_url_for(name)
    try:
        return parse_record(_get_json(target))
    except requests.RequestException as exc:
        raise DetailFetchError(name, str(exc)) from exc
    except (ValueError, ValidationError) as exc:
        raise DetailFetchError(name, f"malformed response: {exc}") from exc
