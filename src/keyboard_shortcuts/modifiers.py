# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import enum

import attr

from .keycodes import KeyCode
from .keystate import KeyboardInput


@enum.unique
class ModifierState(enum.Enum):
    IGNORE = "Ignore"
    REQUIRE_PRESSED = "RequirePressed"
    REQUIRE_NOT_PRESSED = "RequireNotPressed"

    def satisfied(self, physical_pressed: bool) -> bool:
        match self:
            case ModifierState.IGNORE:
                return True
            case ModifierState.REQUIRE_PRESSED:
                return physical_pressed
            case ModifierState.REQUIRE_NOT_PRESSED:
                return not physical_pressed


@enum.unique
class Modifier(enum.Enum):
    # declaration order is display order
    CONTROL = "control"
    ALT = "alt"
    SHIFT = "shift"
    SUPER = "super"

    @enum.property
    def keys(self) -> tuple[KeyCode, KeyCode]:
        match self:
            case Modifier.CONTROL:
                return (KeyCode.ControlLeft, KeyCode.ControlRight)
            case Modifier.ALT:
                return (KeyCode.AltLeft, KeyCode.AltRight)
            case Modifier.SHIFT:
                return (KeyCode.ShiftLeft, KeyCode.ShiftRight)
            case Modifier.SUPER:
                return (KeyCode.SuperLeft, KeyCode.SuperRight)

    @enum.property
    def label(self) -> str:
        match self:
            case Modifier.CONTROL:
                return "Ctrl"
            case Modifier.ALT:
                return "Alt"
            case Modifier.SHIFT:
                return "Shift"
            case Modifier.SUPER:
                return "Super"

    @enum.property
    def field(self) -> str:
        # `super` would shadow the builtin inside ModifierSet
        return "super_key" if self is Modifier.SUPER else self.value

    def held(self, keys: KeyboardInput) -> bool:
        left, right = self.keys
        return keys.pressed(left) or keys.pressed(right)


@attr.frozen(kw_only=True)
class ModifierSet:
    control: ModifierState = attr.field(default=ModifierState.IGNORE)
    alt: ModifierState = attr.field(default=ModifierState.IGNORE)
    shift: ModifierState = attr.field(default=ModifierState.IGNORE)
    super_key: ModifierState = attr.field(default=ModifierState.IGNORE)

    def get(self, modifier: Modifier) -> ModifierState:
        return getattr(self, modifier.field)

    def replace(self, modifier: Modifier, state: ModifierState) -> "ModifierSet":
        return attr.evolve(self, **{modifier.field: state})

    def is_ignored(self) -> bool:
        return all(self.get(modifier) is ModifierState.IGNORE for modifier in Modifier)

    def pressed(self, keys: KeyboardInput) -> bool:
        """Whether every modifier policy is satisfied by the keys currently held."""
        return all(self.get(modifier).satisfied(modifier.held(keys)) for modifier in Modifier)

    def labels(self) -> list[str]:
        return [modifier.label for modifier in Modifier if self.get(modifier) is ModifierState.REQUIRE_PRESSED]

    def __str__(self):
        return " + ".join(self.labels())
