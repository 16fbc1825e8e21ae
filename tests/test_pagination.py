import pytest

from pokegrid.pagination import PageMetadata, Paginator


def test_151_records_last_page(numbered_records):
    paginator = Paginator(numbered_records, page_size=24)

    assert paginator.total_pages == 7
    assert paginator.go_to_page(7)

    visible = paginator.visible_slice()
    meta = paginator.metadata()
    assert [r.id for r in visible] == list(range(145, 152))
    assert meta.showing_start == 145
    assert meta.showing_end == 151
    assert meta.total_items == 151
    assert paginator.is_last_page
    assert not paginator.is_first_page


def test_every_page_but_last_is_full(numbered_records):
    paginator = Paginator(numbered_records, page_size=24)

    for page in range(1, paginator.total_pages + 1):
        paginator.go_to_page(page)
        size = len(paginator.visible_slice())
        assert size <= 24
        if page < paginator.total_pages:
            assert size == 24


def test_out_of_range_jumps_are_noops(numbered_records):
    paginator = Paginator(numbered_records, page_size=24)
    paginator.go_to_page(3)

    assert not paginator.go_to_page(0)
    assert not paginator.go_to_page(paginator.total_pages + 1)
    assert paginator.current_page == 3


def test_count_change_resets_to_first_page(numbered_records):
    paginator = Paginator(numbered_records, page_size=24)
    paginator.go_to_page(5)

    assert paginator.set_items(numbered_records[:100])
    assert paginator.current_page == 1


def test_reordering_same_count_keeps_page(numbered_records):
    paginator = Paginator(numbered_records, page_size=24)
    paginator.go_to_page(4)

    paginator.set_items(list(reversed(numbered_records)))

    assert paginator.current_page == 4
    assert paginator.visible_slice()[0].id == 151 - 72


def test_empty_list_is_a_single_empty_page():
    paginator = Paginator([], page_size=24)

    assert paginator.total_pages == 1
    assert paginator.visible_slice() == []
    assert paginator.is_first_page and paginator.is_last_page
    assert paginator.metadata() == PageMetadata(0, 0, 0)
    assert paginator.page_window().pages == (1,)


def test_next_and_previous_stop_at_edges():
    paginator = Paginator(list(range(50)), page_size=24)

    assert not paginator.previous_page()
    assert paginator.next_page()
    assert paginator.next_page()
    assert not paginator.next_page()
    assert paginator.current_page == 3
    assert paginator.first_page()
    assert paginator.last_page()
    assert paginator.current_page == 3


@pytest.mark.parametrize(
    "current, total, pages, show_first, show_last",
    [
        (1, 5, (1, 2, 3, 4, 5), False, False),
        (7, 7, (1, 2, 3, 4, 5, 6, 7), False, False),
        (1, 20, (1, 2, 3, 4, 5, 6, 7), False, True),
        (4, 20, (1, 2, 3, 4, 5, 6, 7), False, True),
        (5, 20, (2, 3, 4, 5, 6, 7, 8), True, True),
        (10, 20, (7, 8, 9, 10, 11, 12, 13), True, True),
        (16, 20, (13, 14, 15, 16, 17, 18, 19), True, True),
        (17, 20, (14, 15, 16, 17, 18, 19, 20), True, False),
        (20, 20, (14, 15, 16, 17, 18, 19, 20), True, False),
        (4, 8, (1, 2, 3, 4, 5, 6, 7), False, True),
        (5, 8, (2, 3, 4, 5, 6, 7, 8), True, False),
    ],
)
def test_page_window(current, total, pages, show_first, show_last):
    paginator = Paginator(list(range(total * 10)), page_size=10)
    paginator.go_to_page(current)

    window = paginator.page_window()

    assert window.pages == pages
    assert window.show_first is show_first
    assert window.show_last is show_last


def test_metadata_caption():
    paginator = Paginator(list(range(151)), page_size=24)

    assert paginator.metadata().caption() == "Showing 1–24 of 151 Pokémon"
    assert Paginator([]).metadata().caption() == "No Pokémon found"


def test_rejects_non_positive_page_size():
    with pytest.raises(ValueError):
        Paginator([], page_size=0)
