"""Vertical menus: row layout and selection handling."""

import enum
from dataclasses import dataclass

from .pad import Button

ROW_HEIGHT = 0x25
_TOP_LIMIT = 0x14
_BOTTOM_LIMIT = 400
_SLIDER_STEP = 0.01
_FLOAT_STEP = 0.1

_UP = Button.RSTICK_UP | Button.PAD_UP
_DOWN = Button.RSTICK_DOWN | Button.PAD_DOWN
_LEFT = Button.RSTICK_LEFT | Button.PAD_LEFT
_RIGHT = Button.RSTICK_RIGHT | Button.PAD_RIGHT


class MenuKind(enum.IntEnum):
    """What a menu row holds and how left/right act on it."""

    PLAIN = 0
    INT = 1
    FLOAT = 2
    TOGGLE = 3
    SLIDER = 4
    DISABLED = 5


@dataclass
class MenuItem:
    """One row of a menu; ``value`` is changed in place by :meth:`Menu.update`."""

    text: str
    kind: MenuKind = MenuKind.PLAIN
    value: float = 0


class Menu:
    """A list of items with one of them selected."""

    def __init__(self, items, selected=0):
        self.items = list(items)
        if not self.items:
            raise ValueError("a menu needs at least one item")
        if not 0 <= selected < len(self.items):
            raise ValueError(f"selected index {selected} out of range")
        self.selected = selected

    def _scroll(self):
        """Return the vertical offsets for text and background of every row."""
        total_height = len(self.items) * ROW_HEIGHT + 6
        half = total_height // 2
        sel = self.selected

        text_offset = -3
        background_offset = 0
        top = sel * ROW_HEIGHT - half + 0xED
        while top < _TOP_LIMIT:
            top += ROW_HEIGHT
            text_offset += ROW_HEIGHT
            background_offset += ROW_HEIGHT

        bottom = sel * ROW_HEIGHT + 0xF0 - half
        if bottom + text_offset > _BOTTOM_LIMIT:
            text_offset = background_offset - 3
            bottom += text_offset
            while True:
                bottom -= ROW_HEIGHT
                text_offset -= ROW_HEIGHT
                background_offset -= ROW_HEIGHT
                if bottom <= _BOTTOM_LIMIT:
                    break
        return half, text_offset, background_offset - 7

    def layout(self, xpos, ypos):
        """Place every row around ``(xpos, ypos)``, scrolled to keep the selection visible.

        Returns one tuple per item: text x, text y, background y and the
        background brightness before global text brightness is applied.
        """
        half, text_offset, background_offset = self._scroll()
        rows = []
        for idx, item in enumerate(self.items):
            row_top = ypos - half + idx * ROW_HEIGHT
            brightness = 0x80
            if idx == self.selected:
                brightness = 0xD1
            if item.kind == MenuKind.DISABLED:
                brightness = 0x40
            rows.append((xpos, row_top + text_offset, row_top + background_offset, brightness))
        return rows

    def _step(self, updated_buttons):
        sel = self.selected
        change = 0
        new = sel
        if updated_buttons & _UP:
            new -= 1
            change = -1
        if updated_buttons & _DOWN:
            new += 1
            change = 1
        max_sel = len(self.items) - 1
        new = min(max(new, 0), max_sel)

        while True:
            target = new
            if change == 0 or self.items[new].kind != MenuKind.DISABLED:
                break
            new += change
            if new < 0:
                target = 0
                break
            target = max_sel
            if new > max_sel:
                break

        if self.items[target].kind == MenuKind.DISABLED:
            target = sel
            if self.items[sel].kind == MenuKind.DISABLED:
                target = 0
        return target

    @staticmethod
    def _nudge(item, direction):
        if item.kind == MenuKind.INT:
            item.value += direction
        elif item.kind == MenuKind.FLOAT:
            item.value += direction * _FLOAT_STEP
        elif item.kind == MenuKind.TOGGLE:
            item.value = int(item.value == 0)

    def update(self, updated_buttons, held_buttons=0, accept_button=Button.CROSS):
        """Apply one frame of input; return the newly selected index."""
        target = self._step(updated_buttons)
        item = self.items[target]

        if updated_buttons & _LEFT:
            self._nudge(item, -1)
        if held_buttons & _LEFT and item.kind == MenuKind.SLIDER:
            item.value = max(item.value - _SLIDER_STEP, 0.0)
        if held_buttons & _RIGHT and item.kind == MenuKind.SLIDER:
            item.value = min(item.value + _SLIDER_STEP, 1.0)
        if updated_buttons & accept_button and item.kind == MenuKind.TOGGLE:
            item.value = int(item.value == 0)
        if updated_buttons & _RIGHT:
            self._nudge(item, 1)

        self.selected = target
        return target