import pytest

from darkalliance.language_menu import (
    Language,
    choose_language,
    language_for_index,
    make_language_menu,
)
from darkalliance.pad import Button


def test_menu_texts():
    menu = make_language_menu()
    assert [item.text for item in menu.items] == [
        "English", "Fran\u00e7ais", "Deutsch", "Espa\u00f1ol", "Italiano",
    ]
    assert menu.selected == 0


@pytest.mark.parametrize(
    "index, language",
    [(0, Language.ENGLISH), (1, Language.FRENCH), (2, Language.GERMAN),
     (3, Language.SPANISH), (4, Language.ITALIAN)],
)
def test_language_for_index(index, language):
    assert language_for_index(index) == language


def test_language_ids():
    assert [int(language_for_index(i)) for i in range(5)] == [0, 3, 4, 1, 2]


@pytest.mark.parametrize("index", [-1, 5])
def test_language_for_bad_index(index):
    with pytest.raises(ValueError):
        language_for_index(index)


def test_no_choice_without_cross():
    menu = make_language_menu()
    assert choose_language(menu, Button.PAD_DOWN) is None
    assert menu.selected == 1


def test_cross_chooses_selected():
    menu = make_language_menu()
    assert choose_language(menu, Button.CROSS) == Language.ENGLISH


def test_move_then_choose():
    menu = make_language_menu()
    choose_language(menu, Button.PAD_DOWN)
    choose_language(menu, Button.PAD_DOWN)
    assert choose_language(menu, Button.CROSS) == Language.GERMAN


def test_move_and_choose_same_frame():
    menu = make_language_menu()
    assert choose_language(menu, Button.PAD_DOWN | Button.CROSS) == Language.FRENCH