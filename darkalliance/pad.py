"""Controller reading: button conversion, analogue sticks, pressure and rumble."""

import enum
import math
from dataclasses import dataclass, field

FAILED_READ_FRAMES = 0x19
REPEAT_DELAY = 0x14
STICK_BUTTON_THRESHOLD = 0.8
ACT_ALIGN = (0, 1, 0xFF, 0xFF, 0xFF, 0xFF)

_DEAD_ZONE = 0.32
_STICK_GAIN = 1.470588
_START_MASK = 0xF7FF


class Button(enum.IntFlag):
    """Buttons in the game's byte-swapped, active-high layout."""

    L2 = 0x0001
    R2 = 0x0002
    L1 = 0x0004
    R1 = 0x0008
    TRIANGLE = 0x0010
    CIRCLE = 0x0020
    CROSS = 0x0040
    SQUARE = 0x0080
    SELECT = 0x0100
    L3 = 0x0200
    R3 = 0x0400
    START = 0x0800
    PAD_UP = 0x1000
    PAD_RIGHT = 0x2000
    PAD_DOWN = 0x4000
    PAD_LEFT = 0x8000
    RSTICK_UP = 0x100000
    RSTICK_DOWN = 0x200000
    RSTICK_LEFT = 0x400000
    RSTICK_RIGHT = 0x800000


_PRESSURE_BUTTONS = (
    ("pad_right", "right_p", Button.PAD_RIGHT),
    ("pad_left", "left_p", Button.PAD_LEFT),
    ("pad_up", "up_p", Button.PAD_UP),
    ("pad_down", "down_p", Button.PAD_DOWN),
    ("pad_circle", "circle_p", Button.CIRCLE),
    ("pad_square", "square_p", Button.SQUARE),
    ("pad_triangle", "triangle_p", Button.TRIANGLE),
    ("pad_cross", "cross_p", Button.CROSS),
    ("pad_l1", "l1_p", Button.L1),
    ("pad_r1", "r1_p", Button.R1),
    ("pad_l2", "l2_p", Button.L2),
    ("pad_r2", "r2_p", Button.R2),
)


@dataclass
class PadStatus:
    """Raw controller state as the pad driver reports it (buttons active-low)."""

    mode: int = 0x41
    btns: int = 0xFFFF
    rjoy_h: int = 0x80
    rjoy_v: int = 0x80
    ljoy_h: int = 0x80
    ljoy_v: int = 0x80
    right_p: int = 0
    left_p: int = 0
    up_p: int = 0
    down_p: int = 0
    triangle_p: int = 0
    circle_p: int = 0
    cross_p: int = 0
    square_p: int = 0
    l1_p: int = 0
    r1_p: int = 0
    l2_p: int = 0
    r2_p: int = 0


@dataclass
class ControllerInput:
    """Converted controller state for one port."""

    failed_read_countdown: int = 0
    buttons: int = 0
    updated_buttons: int = 0
    updated_buttons2: int = 0
    r_stick_x: float = 0.0
    r_stick_y: float = 0.0
    l_stick_x: float = 0.0
    l_stick_y: float = 0.0
    pad_right: float = 0.0
    pad_left: float = 0.0
    pad_up: float = 0.0
    pad_down: float = 0.0
    pad_l1: float = 0.0
    pad_l2: float = 0.0
    pad_circle: float = 0.0
    pad_square: float = 0.0
    pad_triangle: float = 0.0
    pad_cross: float = 0.0
    pad_r1: float = 0.0
    pad_r2: float = 0.0


@dataclass
class _Actuator:
    small_frames: int = 0
    large_frames: int = 0
    strength: float = 0.0
    decay: float = 0.0
    last_small: int = 0
    last_large: int = 0


class PadBackend:
    """In-memory pad driver: reports the statuses it holds and logs commands.

    ``statuses`` maps a port to its :class:`PadStatus`; a port without an
    entry reads as disconnected. Every command sent is appended to
    ``commands`` as a tuple of its name, port and arguments.
    """

    def __init__(self, statuses=None, press_mode=True):
        self.statuses = dict(statuses or {})
        self.press_mode = press_mode
        self.commands = []

    def read(self, port):
        """Return the status of ``port``, or None when nothing could be read."""
        return self.statuses.get(port)

    def info_press_mode(self, port):
        """Return True when the controller on ``port`` supports pressure mode."""
        return self.press_mode

    def enter_press_mode(self, port):
        self.commands.append(("enter_press_mode", port))

    def set_act_align(self, port, align):
        self.commands.append(("set_act_align", port, tuple(align)))

    def set_main_mode(self, port):
        """Switch the controller on ``port`` to locked analogue mode."""
        self.commands.append(("set_main_mode", port))

    def set_act_direct(self, port, values):
        self.commands.append(("set_act_direct", port, tuple(values)))


def scale_analog_stick(x, y):
    """Map raw 0..255 stick axes to -1..1 with a radial dead zone."""
    fx = (x - 0x80) * 0.0078125
    fy = (y - 0x80) * 0.0078125
    magnitude = math.hypot(fx, fy)
    if magnitude < _DEAD_ZONE:
        return 0.0, 0.0
    gain = (1.0 - _DEAD_ZONE / magnitude) * _STICK_GAIN
    return fx * gain, fy * gain


class PadReader:
    """Polls two controller ports once per frame and converts their state."""

    def __init__(self, backend):
        self.backend = backend
        self.inputs = [ControllerInput(), ControllerInput()]
        self.analogue_mode = [False, False]
        self.repeat_counters = [0, 0]
        self.fast_repeat = False
        self.start_button_pressed = False
        self.limit_input = False
        self.mask_start_frames = 0
        self.accept_button = Button.CROSS
        self.back_button = Button.CIRCLE
        self._actuators = [_Actuator(), _Actuator()]

    def rumble(self, port, frames, strength, decay):
        """Run both motors of ``port`` for ``frames`` reads.

        The large motor starts at ``strength`` (0..1) and loses ``decay``
        every read.
        """
        act = self._actuators[port]
        act.small_frames = frames
        act.large_frames = frames
        act.strength = strength
        act.decay = decay

    def _configure(self, port, status):
        mode = status.mode
        if mode & 0xF0 == 0x70:
            if not self.analogue_mode[port]:
                if mode != 0x79 and self.backend.info_press_mode(port):
                    self.backend.enter_press_mode(port)
            else:
                self.backend.set_act_align(port, ACT_ALIGN)
                self.analogue_mode[port] = False
        else:
            self.backend.set_main_mode(port)
            self.analogue_mode[port] = True

    def _update_rumble(self, port):
        act = self._actuators[port]
        small = 1 if act.small_frames != 0 else 0
        if small:
            act.small_frames -= 1
        if act.strength > 0.0:
            act.strength = max(act.strength - act.decay, 0.0)
        if act.large_frames == 0:
            large = 0
        else:
            act.large_frames -= 1
            large = int(act.strength * 255.0) & 0xFF
        if small != act.last_small or large != act.last_large:
            self.backend.set_act_direct(port, (small, large, 0, 0, 0, 0))
        act.last_small = small
        act.last_large = large

    def _convert(self, inp, status):
        raw = (status.btns ^ 0xFFFF) & 0xFFFF
        inp.buttons = ((raw & 0xFF) << 8) | ((raw >> 8) & 0xFF)

        if self.mask_start_frames != 0:
            self.mask_start_frames -= 1
            inp.buttons &= _START_MASK

        if status.mode & 0xF0 != 0x70:
            return

        for name, pressure, button in _PRESSURE_BUTTONS:
            if status.mode == 0x79:
                value = getattr(status, pressure) / 255.0
            else:
                value = 1.0 if inp.buttons & button == button else 0.0
            setattr(inp, name, value)

        # The game swaps the left and right sticks.
        inp.l_stick_x, inp.l_stick_y = scale_analog_stick(status.rjoy_h, status.rjoy_v)
        inp.r_stick_x, inp.r_stick_y = scale_analog_stick(status.ljoy_h, status.ljoy_v)

        if inp.r_stick_x > STICK_BUTTON_THRESHOLD:
            inp.buttons |= Button.RSTICK_RIGHT
        elif inp.r_stick_x < -STICK_BUTTON_THRESHOLD:
            inp.buttons |= Button.RSTICK_LEFT
        if inp.r_stick_y > STICK_BUTTON_THRESHOLD:
            inp.buttons |= Button.RSTICK_DOWN
        elif inp.r_stick_y < -STICK_BUTTON_THRESHOLD:
            inp.buttons |= Button.RSTICK_UP

    def _limit(self, inp):
        inp.r_stick_x = inp.r_stick_y = 0.0
        inp.l_stick_x = inp.l_stick_y = 0.0
        allowed = int(self.accept_button | self.back_button)
        inp.buttons &= allowed
        inp.updated_buttons &= allowed
        inp.updated_buttons2 &= allowed
        for name, _, _ in _PRESSURE_BUTTONS:
            setattr(inp, name, 0.0)

    def read_input(self):
        """Read both ports and update :attr:`inputs`; return the inputs."""
        statuses = []
        for port, inp in enumerate(self.inputs):
            status = self.backend.read(port)
            statuses.append(status)
            if status is None:
                inp.failed_read_countdown = max(inp.failed_read_countdown - 1, 0)
            else:
                inp.failed_read_countdown = FAILED_READ_FRAMES
                self._configure(port, status)

        self.start_button_pressed = False

        for port, (inp, status) in enumerate(zip(self.inputs, statuses)):
            previous = inp.buttons
            self._update_rumble(port)
            inp.l_stick_x = inp.l_stick_y = 0.0
            inp.r_stick_x = inp.r_stick_y = 0.0
            inp.buttons = 0
            if status is not None:
                self._convert(inp, status)
                pressed = (inp.buttons ^ previous) & inp.buttons
                inp.updated_buttons = pressed
                inp.updated_buttons2 = pressed

        for port, inp in enumerate(self.inputs):
            if inp.buttons == 0:
                self.repeat_counters[port] = 0
            else:
                self.repeat_counters[port] += 2 if self.fast_repeat else 1
                count = self.repeat_counters[port]
                if count > REPEAT_DELAY and count & 3 == 0:
                    inp.updated_buttons2 = inp.buttons
            if self.limit_input:
                self._limit(inp)
        self.limit_input = False
        return self.inputs