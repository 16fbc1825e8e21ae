from __future__ import annotations

import html
from typing import Dict, List

import streamlit as st

from pokegrid import config
from pokegrid.errors import DetailFetchError
from pokegrid.filters import SORT_OPTIONS, apply_filters
from pokegrid.log import get_logger
from pokegrid.models import ALL_TYPES, TYPE_TAGS, QueryState, Record, SortKey
from pokegrid.pagination import Paginator
from pokegrid.render import CATALOG_CSS, render_card_html, render_detail_html
from pokegrid.store import LoadState, RecordStore

logger = get_logger(__name__)

DETAIL_PARAM = "pokemon"

TYPE_FILTERS: Dict[str, str] = {ALL_TYPES: "All Types", **{t: t.title() for t in TYPE_TAGS}}


def set_page_metadata() -> None:
    st.set_page_config(
        page_title="PokéGrid",
        page_icon="⚡️",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    st.markdown(CATALOG_CSS, unsafe_allow_html=True)


def _new_store() -> RecordStore:
    return RecordStore(max_workers=config.DETAIL_FETCH_WORKERS)


def ensure_state() -> None:
    if "record_store" not in st.session_state:
        st.session_state["record_store"] = _new_store()
    if "paginator" not in st.session_state:
        st.session_state["paginator"] = Paginator(page_size=config.PAGE_SIZE)
    if "search_term" not in st.session_state:
        st.session_state["search_term"] = ""
    if "type_filter" not in st.session_state:
        st.session_state["type_filter"] = ALL_TYPES
    if "sort_key" not in st.session_state:
        st.session_state["sort_key"] = SortKey.ID_ASC
    if "reload_requested" not in st.session_state:
        st.session_state["reload_requested"] = False


def _request_reload() -> None:
    st.session_state["reload_requested"] = True


def _open_detail(name: str) -> None:
    st.query_params[DETAIL_PARAM] = name


def _close_detail() -> None:
    st.query_params.clear()


def _go_to_page(page: int) -> None:
    st.session_state["paginator"].go_to_page(page)


def load_catalog(store: RecordStore) -> LoadState:
    """Run (or re-run) the catalog load, drawing a live progress bar."""
    bar = st.progress(0.0, text="Loading Pokémon... Catching them all for you!")

    def _on_progress(state: LoadState) -> None:
        if state.total:
            bar.progress(state.progress, text=f"Loading {state.loaded} of {state.total} Pokémon")

    if st.session_state.get("reload_requested"):
        st.session_state["reload_requested"] = False
        state = store.reload(on_progress=_on_progress)
    else:
        state = store.load(on_progress=_on_progress)
    bar.empty()
    return state


def render_error_state(state: LoadState) -> None:
    st.markdown("## 😞 Oops! Something went wrong")
    st.write("Failed to load Pokémon data. Check your internet connection and try again.")
    if state.error is not None:
        with st.expander("Technical details"):
            st.code(str(state.error))
    st.button("Try Again", key="retry_load", type="primary", on_click=_request_reload)


def render_partial_notice(state: LoadState) -> None:
    missing = len(state.failed)
    cols = st.columns([4, 1], vertical_alignment="center")
    with cols[0]:
        st.warning(
            f"{missing} Pokémon could not be loaded, so the list below is incomplete "
            f"({state.loaded} of {state.total})."
        )
    with cols[1]:
        st.button("Reload", key="reload_partial", use_container_width=True, on_click=_request_reload)


def render_controls() -> QueryState:
    search_col, type_col, sort_col = st.columns([2, 1, 1], vertical_alignment="bottom")
    with search_col:
        st.text_input(
            "Search",
            placeholder="Search Pokémon...",
            key="search_term",
            autocomplete="off",
        )
    with type_col:
        st.selectbox(
            "Type",
            list(TYPE_FILTERS.keys()),
            key="type_filter",
            format_func=lambda key: TYPE_FILTERS.get(key, key.title()),
        )
    with sort_col:
        st.selectbox(
            "Sort by",
            list(SORT_OPTIONS.keys()),
            key="sort_key",
            format_func=lambda key: SORT_OPTIONS.get(key, str(key)),
        )
    return QueryState(
        search_term=st.session_state["search_term"].strip(),
        selected_type=st.session_state["type_filter"],
        sort_key=st.session_state["sort_key"],
    )


def render_grid(records: List[Record]) -> None:
    if not records:
        st.info("No Pokémon match your search. Try a different name or type.")
        return
    cols = st.columns(config.GRID_COLUMNS)
    for idx, record in enumerate(records):
        with cols[idx % config.GRID_COLUMNS]:
            st.markdown(render_card_html(record), unsafe_allow_html=True)
            st.button(
                "View details",
                key=f"view_{record.name}",
                use_container_width=True,
                on_click=_open_detail,
                args=(record.name,),
            )


def render_pagination(paginator: Paginator) -> None:
    meta = paginator.metadata()
    st.caption(meta.caption())
    if paginator.total_pages <= 1:
        return

    window = paginator.page_window()
    # (label, target page or None for an ellipsis)
    slots: List[tuple[str, int | None]] = [("Previous", paginator.current_page - 1)]
    if window.show_first:
        slots += [("1", 1), ("…", None)]
    slots += [(str(page), page) for page in window.pages]
    if window.show_last:
        slots += [("…", None), (str(paginator.total_pages), paginator.total_pages)]
    slots.append(("Next", paginator.current_page + 1))

    cols = st.columns(len(slots))
    for idx, (label, target) in enumerate(slots):
        with cols[idx]:
            if target is None:
                st.markdown(f"<div style='text-align:center'>{html.escape(label)}</div>", unsafe_allow_html=True)
                continue
            if label == "Previous":
                disabled = paginator.is_first_page
            elif label == "Next":
                disabled = paginator.is_last_page
            else:
                disabled = False
            current = label.isdigit() and target == paginator.current_page
            st.button(
                label,
                key=f"page_{idx}_{label}",
                type="primary" if current else "secondary",
                disabled=disabled,
                use_container_width=True,
                on_click=_go_to_page,
                args=(target,),
            )


def render_detail_view(store: RecordStore, name: str) -> None:
    st.button("← Back to Main Page", key="detail_back", on_click=_close_detail)
    try:
        with st.spinner("Loading Pokémon details..."):
            record = store.fetch_record(name)
    except DetailFetchError as exc:
        logger.warning("Detail view failed for %s: %s", name, exc.reason)
        st.error(f"Failed to load Pokémon details: {exc.reason}")
        return
    st.markdown(render_detail_html(record), unsafe_allow_html=True)


def render_listing_view(store: RecordStore) -> None:
    st.markdown("# PokéGrid")
    state = store.state
    if state.is_loading or st.session_state.get("reload_requested"):
        state = load_catalog(store)
    if state.is_fatal:
        render_error_state(state)
        return
    if state.has_error:
        render_partial_notice(state)

    query = render_controls()
    filtered = apply_filters(state.records, query)
    paginator: Paginator = st.session_state["paginator"]
    paginator.set_items(filtered)
    render_grid(paginator.visible_slice())
    render_pagination(paginator)


def render_footer() -> None:
    st.markdown(
        """
        <div class="footer-bar" style="margin-top:2rem;font-size:0.8rem;color:#666666;">
          <span>Pokémon and Pokémon character names are trademarks of Nintendo, Creatures, and GAME FREAK.</span>
          <span>Powered by PokéAPI.</span>
        </div>
        """,
        unsafe_allow_html=True,
    )


def main() -> None:
    set_page_metadata()
    ensure_state()
    store: RecordStore = st.session_state["record_store"]

    detail_name = (st.query_params.get(DETAIL_PARAM) or "").strip()
    if detail_name:
        render_detail_view(store, detail_name)
    else:
        render_listing_view(store)
    render_footer()


if __name__ == "__main__":
    main()
