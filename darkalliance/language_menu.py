"""The language selection screen."""

import enum

from .menu import Menu, MenuItem
from .pad import Button


class Language(enum.IntEnum):
    """Language ids as the game stores them."""

    ENGLISH = 0
    SPANISH = 1
    ITALIAN = 2
    FRENCH = 3
    GERMAN = 4


_CHOICES = (
    ("English", Language.ENGLISH),
    ("Fran\u00e7ais", Language.FRENCH),
    ("Deutsch", Language.GERMAN),
    ("Espa\u00f1ol", Language.SPANISH),
    ("Italiano", Language.ITALIAN),
)


def make_language_menu():
    """Build the menu listing every language, English selected."""
    return Menu([MenuItem(text) for text, _ in _CHOICES])


def language_for_index(index):
    """Return the language shown at row ``index`` of the language menu."""
    if not 0 <= index < len(_CHOICES):
        raise ValueError(f"no language at menu index {index}")
    return _CHOICES[index][1]


def choose_language(menu, updated_buttons, held_buttons=0):
    """Run one frame of the menu; return the chosen language, or None if none yet."""
    menu.update(updated_buttons, held_buttons, Button.CROSS)
    if updated_buttons & Button.CROSS == Button.CROSS:
        return language_for_index(menu.selected)
    return None