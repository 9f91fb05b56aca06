# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import pytest
from keyboard_shortcuts.keycodes import KeyCode
from keyboard_shortcuts.keystate import KeyboardState
from keyboard_shortcuts.modifiers import Modifier, ModifierSet, ModifierState
from keyboard_shortcuts.shortcuts import Shortcut, Shortcuts, TriggerMode


class CountingKeyboard:
    """Records which keys were asked about."""

    def __init__(self, held=(), just_pressed=()):
        self.held = set(held)
        self.newly_pressed = set(just_pressed)
        self.queried = []

    def pressed(self, key):
        self.queried.append(key)
        return key in self.held

    def just_pressed(self, key):
        self.queried.append(key)
        return key in self.newly_pressed


def test_trigger_mode_from_constructor():
    assert not Shortcuts.single_press([KeyCode.KeyW]).repeats
    assert Shortcuts.single_press([KeyCode.KeyW]).trigger_mode is TriggerMode.SINGLE_PRESS
    assert Shortcuts.repeating([KeyCode.KeyW]).repeats
    assert Shortcuts.repeating([KeyCode.KeyW]).trigger_mode is TriggerMode.REPEATING


def test_ignored_modifiers_reduce_to_key_test():
    shortcut = Shortcut(key=KeyCode.KeyA)
    keys = KeyboardState()
    assert not shortcut.matches(keys, TriggerMode.REPEATING)
    assert not shortcut.matches(keys, TriggerMode.SINGLE_PRESS)
    keys.press(KeyCode.KeyA)
    assert shortcut.matches(keys, TriggerMode.REPEATING)
    assert shortcut.matches(keys, TriggerMode.SINGLE_PRESS)
    keys.clear()
    assert shortcut.matches(keys, TriggerMode.REPEATING)
    assert not shortcut.matches(keys, TriggerMode.SINGLE_PRESS)


def test_modifiers_not_queried_when_key_is_up():
    shortcut = Shortcut(key=KeyCode.KeyS, modifiers=ModifierSet(control=ModifierState.REQUIRE_PRESSED))
    keys = CountingKeyboard(held={KeyCode.ControlLeft})
    assert not shortcut.matches(keys, TriggerMode.REPEATING)
    assert keys.queried == [KeyCode.KeyS]


def test_unknown_keys_read_as_not_held():
    keys = CountingKeyboard()
    assert not Shortcuts.repeating([KeyCode.F35]).pressed(keys)


def test_repeating_fires_while_held():
    shortcuts = Shortcuts.repeating([KeyCode.KeyA])
    keys = KeyboardState()
    assert not shortcuts.pressed(keys)
    keys.press(KeyCode.KeyA)
    for _ in range(3):
        assert shortcuts.pressed(keys)
        keys.clear()
    keys.release(KeyCode.KeyA)
    assert not shortcuts.pressed(keys)


def test_single_press_fires_once_per_press():
    shortcuts = Shortcuts.single_press([KeyCode.KeyA])
    keys = KeyboardState()
    assert not shortcuts.pressed(keys)
    keys.press(KeyCode.KeyA)
    assert shortcuts.pressed(keys)
    keys.clear()
    # still held on the following ticks
    for _ in range(3):
        keys.press(KeyCode.KeyA)
        assert not shortcuts.pressed(keys)
        keys.clear()
    keys.release(KeyCode.KeyA)
    keys.clear()
    keys.press(KeyCode.KeyA)
    assert shortcuts.pressed(keys)


def test_multiple_alternatives():
    shortcuts = Shortcuts.repeating([KeyCode.KeyA, KeyCode.ArrowLeft])
    keys = KeyboardState()
    keys.press(KeyCode.KeyA)
    assert shortcuts.pressed(keys)
    keys.release(KeyCode.KeyA)
    keys.clear()
    assert not shortcuts.pressed(keys)
    keys.press(KeyCode.ArrowLeft)
    for _ in range(3):
        assert shortcuts.pressed(keys)
        keys.clear()


def test_only_second_alternative_matches():
    shortcuts = Shortcuts(
        [
            Shortcut(key=KeyCode.KeyZ, modifiers=ModifierSet(control=ModifierState.REQUIRE_PRESSED)),
            Shortcut(key=KeyCode.KeyZ, modifiers=ModifierSet(control=ModifierState.REQUIRE_NOT_PRESSED)),
        ],
        repeats=True,
    )
    keys = KeyboardState()
    keys.press(KeyCode.KeyZ)
    assert not shortcuts.shortcuts[0].matches(keys, TriggerMode.REPEATING)
    assert shortcuts.pressed(keys)


def test_empty_shortcuts_never_fire():
    keys = KeyboardState()
    keys.press(KeyCode.KeyA)
    assert not Shortcuts().pressed(keys)
    assert not Shortcuts(repeats=True).pressed(keys)
    assert not Shortcuts.single_press([]).pressed(keys)


def test_ctrl_s_on_press_tick():
    save = Shortcuts.single_press([KeyCode.KeyS]).with_control()
    keys = KeyboardState()
    keys.press(KeyCode.ControlLeft)
    keys.press(KeyCode.KeyS)
    assert save.pressed(keys)

    keys = KeyboardState()
    keys.press(KeyCode.KeyS)
    assert not save.pressed(keys)


def test_ctrl_pressed_after_key():
    save = Shortcuts.single_press([KeyCode.KeyS]).with_control()
    keys = KeyboardState()
    keys.press(KeyCode.KeyS)
    assert not save.pressed(keys)
    keys.press(KeyCode.ControlRight)
    assert save.pressed(keys)


def test_multiple_modifiers_required():
    redo = Shortcuts.single_press([KeyCode.KeyZ]).with_control().with_shift()
    keys = KeyboardState()
    keys.press(KeyCode.KeyZ)
    keys.press(KeyCode.ControlLeft)
    assert not redo.pressed(keys)
    keys.press(KeyCode.ShiftLeft)
    assert redo.pressed(keys)


@pytest.mark.parametrize(
    "method,key,modifier_key",
    (
        ("without_control", KeyCode.KeyS, KeyCode.ControlLeft),
        ("without_alt", KeyCode.F4, KeyCode.AltLeft),
        ("without_shift", KeyCode.Tab, KeyCode.ShiftLeft),
        ("without_super", KeyCode.KeyD, KeyCode.SuperLeft),
    ),
)
def test_without_modifier(method: str, key: KeyCode, modifier_key: KeyCode):
    shortcuts = getattr(Shortcuts.single_press([key]), method)()
    keys = KeyboardState()
    keys.press(key)
    assert shortcuts.pressed(keys)
    keys.press(modifier_key)
    assert not shortcuts.pressed(keys)


def test_default_ignores_modifiers():
    shortcuts = Shortcuts.single_press([KeyCode.KeyA])
    keys = KeyboardState()
    keys.press(KeyCode.KeyA)
    assert shortcuts.pressed(keys)
    for modifier_key in (KeyCode.ControlLeft, KeyCode.AltLeft, KeyCode.ShiftLeft, KeyCode.SuperLeft):
        keys.press(modifier_key)
        assert shortcuts.pressed(keys)


def test_mixed_modifier_modes():
    shortcuts = Shortcuts.single_press([KeyCode.KeyZ]).with_control().without_shift()
    keys = KeyboardState()
    keys.press(KeyCode.KeyZ)
    keys.press(KeyCode.ControlLeft)
    assert shortcuts.pressed(keys)
    keys.press(KeyCode.AltLeft)
    assert shortcuts.pressed(keys)
    keys.press(KeyCode.ShiftLeft)
    assert not shortcuts.pressed(keys)


def test_modifiers_apply_to_every_alternative():
    shortcuts = Shortcuts.single_press([KeyCode.KeyS, KeyCode.F2]).with_control().without_alt()
    expected = ModifierSet(control=ModifierState.REQUIRE_PRESSED, alt=ModifierState.REQUIRE_NOT_PRESSED)
    assert [shortcut.modifiers for shortcut in shortcuts] == [expected, expected]
    keys = KeyboardState()
    keys.press(KeyCode.F2)
    keys.press(KeyCode.ControlLeft)
    assert shortcuts.pressed(keys)


def test_modifier_setters_last_write_wins():
    twice = Shortcuts.single_press([KeyCode.KeyS]).with_control().with_control()
    assert twice == Shortcuts.single_press([KeyCode.KeyS]).with_control()
    flipped = Shortcuts.single_press([KeyCode.KeyS]).with_control().without_control()
    assert flipped.shortcuts[0].modifiers.get(Modifier.CONTROL) is ModifierState.REQUIRE_NOT_PRESSED
    assert flipped.shortcuts[0].modifiers.replace(Modifier.CONTROL, ModifierState.IGNORE).is_ignored()


def test_builders_return_new_values():
    plain = Shortcuts.repeating([KeyCode.KeyA])
    with_ctrl = plain.with_control()
    assert plain.shortcuts[0].modifiers.is_ignored()
    assert not with_ctrl.shortcuts[0].modifiers.is_ignored()
    assert with_ctrl.repeats


def test_shortcuts_are_hashable_values():
    a = Shortcuts.single_press([KeyCode.KeyS]).with_control()
    b = Shortcuts.single_press([KeyCode.KeyS]).with_control()
    assert a == b
    assert len({a, b}) == 1
    assert len(a) == 1
