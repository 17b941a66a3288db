import pytest

from darkalliance.menu import ROW_HEIGHT, Menu, MenuItem, MenuKind
from darkalliance.pad import Button


def plain(n):
    return [MenuItem(f"item{i}") for i in range(n)]


def test_empty_menu_rejected():
    with pytest.raises(ValueError):
        Menu([])


def test_selected_out_of_range_rejected():
    with pytest.raises(ValueError):
        Menu(plain(2), selected=2)


def test_down_moves_selection():
    menu = Menu(plain(3))
    assert menu.update(Button.PAD_DOWN) == 1
    assert menu.selected == 1


def test_up_at_top_stays():
    menu = Menu(plain(3))
    assert menu.update(Button.PAD_UP) == 0


def test_down_at_bottom_stays():
    menu = Menu(plain(3), selected=2)
    assert menu.update(Button.RSTICK_DOWN) == 2


def test_skips_disabled_item():
    items = [MenuItem("a"), MenuItem("b", MenuKind.DISABLED), MenuItem("c")]
    menu = Menu(items)
    assert menu.update(Button.PAD_DOWN) == 2


def test_disabled_at_end_keeps_selection():
    items = [MenuItem("a"), MenuItem("b"), MenuItem("c", MenuKind.DISABLED)]
    menu = Menu(items, selected=1)
    assert menu.update(Button.PAD_DOWN) == 1


def test_disabled_at_start_keeps_selection():
    items = [MenuItem("a", MenuKind.DISABLED), MenuItem("b"), MenuItem("c")]
    menu = Menu(items, selected=1)
    assert menu.update(Button.PAD_UP) == 1


def test_int_item_left_and_right():
    item = MenuItem("count", MenuKind.INT, 5)
    menu = Menu([item])
    menu.update(Button.PAD_RIGHT)
    assert item.value == 6
    menu.update(Button.PAD_LEFT)
    menu.update(Button.RSTICK_LEFT)
    assert item.value == 4


def test_toggle_flips_on_accept():
    item = MenuItem("flag", MenuKind.TOGGLE, 0)
    menu = Menu([item])
    menu.update(Button.CROSS)
    assert item.value == 1
    menu.update(Button.CROSS)
    assert item.value == 0


def test_toggle_uses_given_accept_button():
    item = MenuItem("flag", MenuKind.TOGGLE, 0)
    menu = Menu([item])
    menu.update(Button.CROSS, accept_button=Button.CIRCLE)
    assert item.value == 0
    menu.update(Button.CIRCLE, accept_button=Button.CIRCLE)
    assert item.value == 1


def test_slider_clamps():
    item = MenuItem("volume", MenuKind.SLIDER, 0.995)
    menu = Menu([item])
    menu.update(0, Button.PAD_RIGHT)
    assert item.value == 1.0
    item.value = 0.005
    menu.update(0, Button.PAD_LEFT)
    assert item.value == 0.0


def test_slider_ignores_updated_only():
    item = MenuItem("volume", MenuKind.SLIDER, 0.5)
    menu = Menu([item])
    menu.update(Button.PAD_RIGHT, 0)
    assert item.value == 0.5


def test_layout_rows_are_evenly_spaced():
    menu = Menu(plain(5), selected=2)
    rows = menu.layout(0x140, 0x182)
    assert len(rows) == 5
    ys = [row[1] for row in rows]
    assert all(b - a == ROW_HEIGHT for a, b in zip(ys, ys[1:]))
    assert all(row[0] == 0x140 for row in rows)
    assert all(row[1] - row[2] == 4 for row in rows)


def test_layout_brightness():
    items = [MenuItem("a"), MenuItem("b"), MenuItem("c", MenuKind.DISABLED)]
    rows = Menu(items, selected=1).layout(0, 0)
    assert [row[3] for row in rows] == [0x80, 0xD1, 0x40]


def test_layout_language_menu_position():
    rows = Menu(plain(5)).layout(0x140, 0x182)
    assert rows[0][1] == 288


@pytest.mark.parametrize("selected", [0, 10, 19])
def test_layout_keeps_selection_on_screen(selected):
    menu = Menu(plain(20), selected=selected)
    rows = menu.layout(0, 240)
    y = rows[selected][1]
    assert 20 <= y <= 400