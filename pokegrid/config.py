from __future__ import annotations

import logging
from typing import Dict

POKEAPI_BASE = "https://pokeapi.co/api/v2"
LIST_LIMIT = 151
PAGE_SIZE = 24
MAX_VISIBLE_PAGES = 7
GRID_COLUMNS = 4

REQUEST_TIMEOUT = 10
# None fans out one worker per entry.
DETAIL_FETCH_WORKERS: int | None = 32
USER_AGENT = "PokeGrid/0.1 (+https://pokeapi.co)"

LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

TYPE_COLORS: Dict[str, str] = {
    "normal": "#A8A77A",
    "fire": "#EE8130",
    "water": "#6390F0",
    "electric": "#F7D02C",
    "grass": "#7AC74C",
    "ice": "#96D9D6",
    "fighting": "#C22E28",
    "poison": "#A33EA1",
    "ground": "#E2BF65",
    "flying": "#A98FF3",
    "psychic": "#F95587",
    "bug": "#A6B91A",
    "rock": "#B6A136",
    "ghost": "#735797",
    "dragon": "#6F35FC",
    "dark": "#705746",
    "steel": "#B7B7CE",
    "fairy": "#D685AD",
}
FALLBACK_TYPE_COLOR = "#777777"
