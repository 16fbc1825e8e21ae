from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, List, Sequence, Tuple

from pokegrid import config, pokeapi_live
from pokegrid.errors import DetailFetchError, ListFetchError, PokeGridError
from pokegrid.log import get_logger
from pokegrid.models import BaseListEntry, Record

logger = get_logger(__name__)


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    DONE = "done"
    ERROR = "error"


@dataclass(frozen=True)
class LoadState:
    status: LoadStatus = LoadStatus.IDLE
    records: Tuple[Record, ...] = ()
    loaded: int = 0
    total: int = 0
    has_error: bool = False
    error: PokeGridError | None = None
    failed: Tuple[str, ...] = ()

    @property
    def is_loading(self) -> bool:
        return self.status in (LoadStatus.IDLE, LoadStatus.LOADING)

    @property
    def is_fatal(self) -> bool:
        return self.status is LoadStatus.ERROR

    @property
    def progress(self) -> float:
        if self.total <= 0:
            return 0.0
        return min(1.0, self.loaded / self.total)


ProgressCallback = Callable[[LoadState], None]
ListFetcher = Callable[[], List[BaseListEntry]]
DetailFetcher = Callable[[BaseListEntry], Record]


def _default_list_fetcher() -> List[BaseListEntry]:
    return pokeapi_live.fetch_base_list(config.LIST_LIMIT)


def _default_detail_fetcher(entry: BaseListEntry) -> Record:
    return pokeapi_live.fetch_record(entry.name, entry.detail_url)


class RecordStore:
    """Loads the catalog once per session and keeps every record by name.

    Detail fetches fan out over a thread pool; state is only written from the
    thread that called load(), as each future completes.
    """

    def __init__(
        self,
        list_fetcher: ListFetcher | None = None,
        detail_fetcher: DetailFetcher | None = None,
        max_workers: int | None = None,
    ) -> None:
        self._list_fetcher = list_fetcher or _default_list_fetcher
        self._detail_fetcher = detail_fetcher or _default_detail_fetcher
        self._max_workers = max_workers
        self._cache: Dict[str, Record] = {}
        self._state = LoadState()

    @property
    def state(self) -> LoadState:
        return self._state

    def get(self, name: str) -> Record | None:
        return self._cache.get(name.strip().lower())

    def __len__(self) -> int:
        return len(self._cache)

    def _publish(self, on_progress: ProgressCallback | None, **changes: object) -> None:
        self._state = replace(self._state, **changes)
        if on_progress is not None:
            on_progress(self._state)

    def load(self, on_progress: ProgressCallback | None = None) -> LoadState:
        self._publish(on_progress, status=LoadStatus.LOADING)
        logger.info("Loading Pokémon list")
        try:
            entries = self._list_fetcher()
        except ListFetchError as exc:
            logger.error("List fetch failed: %s", exc)
            self._publish(
                on_progress,
                status=LoadStatus.ERROR,
                records=(),
                loaded=0,
                total=0,
                has_error=True,
                error=exc,
            )
            return self._state

        cached = [self._cache[e.name] for e in entries if e.name in self._cache]
        pending = [e for e in entries if e.name not in self._cache]
        logger.info("Fetching %d of %d Pokémon (%d cached)", len(pending), len(entries), len(cached))
        self._publish(
            on_progress,
            records=tuple(cached),
            loaded=len(cached),
            total=len(entries),
            has_error=False,
            error=None,
            failed=(),
        )

        if pending:
            self._fan_out(pending, on_progress)

        self._publish(on_progress, status=LoadStatus.DONE)
        if self._state.has_error:
            logger.warning(
                "Loaded %d of %d Pokémon; %d failed",
                self._state.loaded,
                self._state.total,
                len(self._state.failed),
            )
        else:
            logger.info("Loaded %d Pokémon", self._state.loaded)
        return self._state

    def _fan_out(self, entries: Sequence[BaseListEntry], on_progress: ProgressCallback | None) -> None:
        workers = self._max_workers or len(entries)
        pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="pokegrid-detail")
        futures: Dict[Future[Record], BaseListEntry] = {
            pool.submit(self._detail_fetcher, entry): entry for entry in entries
        }
        try:
            self._drain(futures, on_progress)
        except BaseException:
            # Interrupted (e.g. a UI rerun raised from on_progress): drop queued
            # fetches and keep whatever already finished for the next load().
            pool.shutdown(wait=False, cancel_futures=True)
            self._keep_finished(futures)
            raise
        pool.shutdown(wait=True)

    def _keep_finished(self, futures: Dict[Future[Record], BaseListEntry]) -> None:
        for future in futures:
            if future.done() and not future.cancelled() and future.exception() is None:
                record = future.result()
                self._cache.setdefault(record.name, record)

    def _drain(self, futures: Dict[Future[Record], BaseListEntry], on_progress: ProgressCallback | None) -> None:
        for future in as_completed(futures):
            entry = futures[future]
            try:
                record = future.result()
            except DetailFetchError as exc:
                logger.warning("Detail fetch failed for %s: %s", entry.name, exc.reason)
                self._publish(
                    on_progress,
                    has_error=True,
                    error=self._state.error or exc,
                    failed=self._state.failed + (entry.name,),
                )
                continue
            self._cache[record.name] = record
            self._publish(
                on_progress,
                records=self._state.records + (record,),
                loaded=self._state.loaded + 1,
            )

    def reload(self, on_progress: ProgressCallback | None = None) -> LoadState:
        """Drop every cached record and load from scratch."""
        logger.info("Reloading catalog from scratch")
        self._cache.clear()
        self._state = LoadState()
        return self.load(on_progress)

    def fetch_record(self, name: str) -> Record:
        """Return a cached record, fetching it on its own when not loaded yet."""
        cached = self.get(name)
        if cached is not None:
            return cached
        slug = name.strip().lower()
        if not slug:
            raise DetailFetchError(name, "empty name")
        entry = BaseListEntry(name=slug, url=pokeapi_live.detail_url_for(slug))
        record = self._detail_fetcher(entry)
        self._cache[record.name] = record
        return record
