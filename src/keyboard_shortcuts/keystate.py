# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc
import enum
import typing

import msgspec

from .keycodes import KeyCode


@typing.runtime_checkable
class KeyboardInput(typing.Protocol):
    def pressed(self, key: KeyCode) -> bool:
        ...

    def just_pressed(self, key: KeyCode) -> bool:
        ...


# Press values match evdev EV_KEY: 1 for keydown, 0 for keyup, 2 for autorepeat.
class KeyPress(enum.IntEnum):
    RELEASED = 0
    PRESSED = 1
    REPEATED = 2


class KeyEvent(msgspec.Struct, frozen=True):
    key: KeyCode
    press: KeyPress

    @classmethod
    def pressed(cls, key: KeyCode):
        return cls(key=key, press=KeyPress.PRESSED)

    @classmethod
    def released(cls, key: KeyCode):
        return cls(key=key, press=KeyPress.RELEASED)


class KeyboardState:
    """Which keys are held, and which changed since the last clear().

    The host calls press()/release() (or apply()) as events arrive during a tick, lets
    everything interested read the state, then calls clear() before the next tick.
    """

    def __init__(self):
        self._held: set[KeyCode] = set()
        self._just_pressed: set[KeyCode] = set()
        self._just_released: set[KeyCode] = set()

    def __repr__(self):
        return f"<KeyboardState held={sorted(k.name for k in self._held)!r}>"

    def press(self, key: KeyCode):
        if key not in self._held:
            self._held.add(key)
            self._just_pressed.add(key)

    def release(self, key: KeyCode):
        if key in self._held:
            self._held.remove(key)
            self._just_released.add(key)

    def release_all(self):
        self._just_released.update(self._held)
        self._held.clear()

    def apply(self, event: KeyEvent):
        match event.press:
            case KeyPress.PRESSED | KeyPress.REPEATED:
                # an autorepeat for a held key is not a new press
                self.press(event.key)
            case KeyPress.RELEASED:
                self.release(event.key)

    def pressed(self, key: KeyCode) -> bool:
        return key in self._held

    def any_pressed(self, keys: collections.abc.Iterable[KeyCode]) -> bool:
        return any(key in self._held for key in keys)

    def just_pressed(self, key: KeyCode) -> bool:
        return key in self._just_pressed

    def just_released(self, key: KeyCode) -> bool:
        return key in self._just_released

    def get_pressed(self) -> frozenset[KeyCode]:
        return frozenset(self._held)

    def get_just_pressed(self) -> frozenset[KeyCode]:
        return frozenset(self._just_pressed)

    def clear_just_pressed(self, key: KeyCode) -> bool:
        if key in self._just_pressed:
            self._just_pressed.remove(key)
            return True
        return False

    def clear_just_released(self, key: KeyCode) -> bool:
        if key in self._just_released:
            self._just_released.remove(key)
            return True
        return False

    def clear(self):
        self._just_pressed.clear()
        self._just_released.clear()

    def reset_all(self):
        self._held.clear()
        self.clear()
