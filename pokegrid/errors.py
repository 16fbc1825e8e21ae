from __future__ import annotations


class PokeGridError(Exception):
    """Base class for catalog loading failures."""


class ListFetchError(PokeGridError):
    """The base list could not be fetched or parsed. Nothing can be shown."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch Pokémon list from {url}: {reason}")


class DetailFetchError(PokeGridError):
    """One record's detail request failed; the rest of the catalog survives."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to fetch {name}: {reason}")
