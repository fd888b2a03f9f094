from kilo_engine.buffer import expand_tabs, raw_to_rendered, rendered_to_raw


def test_expand_tabs_pads_to_next_stop() -> None:
    assert expand_tabs("a\tb") == "a" + " " * 7 + "b"
    assert expand_tabs("\tx", 4) == "    x"
    assert expand_tabs("12345678\tx") == "12345678" + " " * 8 + "x"


def test_raw_to_rendered_accounts_for_tabs() -> None:
    assert raw_to_rendered("abc", 2) == 2
    assert raw_to_rendered("a\tb", 1) == 1
    assert raw_to_rendered("a\tb", 2) == 8
    assert raw_to_rendered("a\tb", 3) == 9


def test_rendered_to_raw_maps_tab_cells_to_the_tab() -> None:
    raw = "a\tb"

    assert rendered_to_raw(raw, 0) == 0
    assert [rendered_to_raw(raw, rx) for rx in range(1, 8)] == [1] * 7
    assert rendered_to_raw(raw, 8) == 2
    assert rendered_to_raw(raw, 20) == len(raw)


def test_mapping_is_inverse_without_tabs() -> None:
    raw = "hello world"
    for cx in range(len(raw) + 1):
        assert rendered_to_raw(raw, raw_to_rendered(raw, cx)) == cx


def test_mapping_round_trips_within_tab_cell() -> None:
    raw = "\tx\ty"
    for cx in range(len(raw) + 1):
        rx = raw_to_rendered(raw, cx)
        assert rendered_to_raw(raw, rx) == cx
