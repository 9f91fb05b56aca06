# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc
import enum
import typing

import attr

from .keycodes import KeyCode, display_token
from .keystate import KeyboardInput
from .modifiers import Modifier, ModifierSet, ModifierState


class TriggerMode(enum.Enum):
    REPEATING = enum.auto()
    SINGLE_PRESS = enum.auto()


@attr.frozen(kw_only=True)
class Shortcut:
    key: KeyCode
    modifiers: ModifierSet = attr.field(factory=ModifierSet)

    def matches(self, keys: KeyboardInput, mode: TriggerMode) -> bool:
        match mode:
            case TriggerMode.REPEATING:
                key_down = keys.pressed(self.key)
            case TriggerMode.SINGLE_PRESS:
                key_down = keys.just_pressed(self.key)
        # modifiers are only looked at once the key itself has fired
        return key_down and self.modifiers.pressed(keys)

    def with_modifier(self, modifier: Modifier, state: ModifierState) -> "Shortcut":
        return attr.evolve(self, modifiers=self.modifiers.replace(modifier, state))

    def __str__(self):
        return " + ".join(self.modifiers.labels() + [display_token(self.key)])


@attr.frozen
class Shortcuts:
    """Alternative shortcuts for one action; any one of them triggers it.

    Build these with the constructors and chain modifier requirements onto them:

        save = Shortcuts.single_press([KeyCode.KeyS]).with_control()
        move_left = Shortcuts.repeating([KeyCode.KeyA, KeyCode.ArrowLeft])

    Repeating shortcuts fire on every tick the key is held; single-press shortcuts fire
    only on the tick the key goes down. Each modifier method applies to every alternative
    and replaces whatever that modifier was previously set to.
    """

    shortcuts: tuple[Shortcut, ...] = attr.field(default=(), converter=tuple)
    repeats: bool = attr.field(default=False, kw_only=True)

    @classmethod
    def single_press(cls, keys: collections.abc.Iterable[KeyCode]):
        return cls([Shortcut(key=key) for key in keys], repeats=False)

    @classmethod
    def repeating(cls, keys: collections.abc.Iterable[KeyCode]):
        return cls([Shortcut(key=key) for key in keys], repeats=True)

    @property
    def trigger_mode(self) -> TriggerMode:
        return TriggerMode.REPEATING if self.repeats else TriggerMode.SINGLE_PRESS

    def with_modifier(self, modifier: Modifier, state: ModifierState) -> "Shortcuts":
        return attr.evolve(self, shortcuts=[shortcut.with_modifier(modifier, state) for shortcut in self.shortcuts])

    def with_control(self):
        return self.with_modifier(Modifier.CONTROL, ModifierState.REQUIRE_PRESSED)

    def with_alt(self):
        return self.with_modifier(Modifier.ALT, ModifierState.REQUIRE_PRESSED)

    def with_shift(self):
        return self.with_modifier(Modifier.SHIFT, ModifierState.REQUIRE_PRESSED)

    def with_super(self):
        return self.with_modifier(Modifier.SUPER, ModifierState.REQUIRE_PRESSED)

    def without_control(self):
        return self.with_modifier(Modifier.CONTROL, ModifierState.REQUIRE_NOT_PRESSED)

    def without_alt(self):
        return self.with_modifier(Modifier.ALT, ModifierState.REQUIRE_NOT_PRESSED)

    def without_shift(self):
        return self.with_modifier(Modifier.SHIFT, ModifierState.REQUIRE_NOT_PRESSED)

    def without_super(self):
        return self.with_modifier(Modifier.SUPER, ModifierState.REQUIRE_NOT_PRESSED)

    def pressed(self, keys: KeyboardInput) -> bool:
        mode = self.trigger_mode
        return any(shortcut.matches(keys, mode) for shortcut in self.shortcuts)

    def __iter__(self) -> typing.Iterator[Shortcut]:
        return iter(self.shortcuts)

    def __len__(self):
        return len(self.shortcuts)

    def __str__(self):
        return ", ".join(str(shortcut) for shortcut in self.shortcuts)
