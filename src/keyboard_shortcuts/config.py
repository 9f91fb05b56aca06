# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import dataclasses
import logging
import operator
import pathlib
import typing

import cattrs
import msgspec
from cattrs.gen import make_dict_structure_fn, make_dict_unstructure_fn, override

from .commontypes import InvalidModifierTag, MalformedShortcut, ShortcutDecodeError
from .keycodes import KeyCode
from .keystate import KeyboardInput
from .modifiers import ModifierSet, ModifierState
from .shortcuts import Shortcut, Shortcuts

logger = logging.getLogger(__name__)

# Format of a keymap file, here as TOML:
#
#     [move_left]
#     repeats = true
#     shortcuts = [{ key = "KeyA" }, { key = "ArrowLeft" }]
#
#     [save]
#     repeats = false
#     shortcuts = [{ key = "KeyS", modifiers = { control = "RequirePressed" } }]
#
# Modifiers which are absent are ignored when matching.

TEST_BINDINGS = {
    "move_left": {"repeats": True, "shortcuts": [{"key": "KeyA"}, {"key": "ArrowLeft"}]},
    "move_right": {"repeats": True, "shortcuts": [{"key": "KeyD"}, {"key": "ArrowRight"}]},
    "save": {"repeats": False, "shortcuts": [{"key": "KeyS", "modifiers": {"control": "RequirePressed"}}]},
    "redo": {
        "repeats": False,
        "shortcuts": [{"key": "KeyZ", "modifiers": {"control": "RequirePressed", "shift": "RequirePressed"}}],
    },
    "type_s": {"repeats": False, "shortcuts": [{"key": "KeyS", "modifiers": {"control": "RequireNotPressed"}}]},
}

FORMATS_BY_SUFFIX = {
    ".json": "json",
    ".toml": "toml",
}


def structure_modifier_state(v: typing.Any, typ: type[ModifierState]):
    # null and an explicit "Ignore" both mean the same thing as leaving the modifier out
    if v is None:
        return ModifierState.IGNORE
    if not isinstance(v, str):
        raise InvalidModifierTag(v)
    try:
        return ModifierState(v)
    except ValueError:
        raise InvalidModifierTag(v) from None


def structure_strict_bool(v: typing.Any, typ: type[bool]):
    if not isinstance(v, bool):
        raise MalformedShortcut(v, f"Expected true or false, got {v!r}")
    return v


shortcuts_converter = cattrs.Converter(detailed_validation=False)
shortcuts_converter.register_structure_hook(KeyCode, lambda v, _: KeyCode.from_name(v))
shortcuts_converter.register_unstructure_hook(KeyCode, operator.attrgetter("name"))
shortcuts_converter.register_structure_hook(ModifierState, structure_modifier_state)
shortcuts_converter.register_unstructure_hook(ModifierState, operator.attrgetter("value"))
shortcuts_converter.register_structure_hook(bool, structure_strict_bool)

shortcuts_converter.register_structure_hook(
    ModifierSet,
    make_dict_structure_fn(ModifierSet, shortcuts_converter, super_key=override(rename="super")),
)
shortcuts_converter.register_unstructure_hook(
    ModifierSet,
    make_dict_unstructure_fn(
        ModifierSet,
        shortcuts_converter,
        control=override(omit_if_default=True),
        alt=override(omit_if_default=True),
        shift=override(omit_if_default=True),
        super_key=override(rename="super", omit_if_default=True),
    ),
)
shortcuts_converter.register_unstructure_hook(
    Shortcut,
    make_dict_unstructure_fn(Shortcut, shortcuts_converter, modifiers=override(omit_if_default=True)),
)


def structure_shortcuts(raw: typing.Any) -> Shortcuts:
    if not isinstance(raw, dict):
        raise MalformedShortcut(raw, f"Expected a table with repeats and shortcuts, got {raw!r}")
    if "shortcuts" not in raw:
        raise MalformedShortcut(raw, "Missing required field 'shortcuts'")
    try:
        return shortcuts_converter.structure(raw, Shortcuts)
    except ShortcutDecodeError:
        raise
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise MalformedShortcut(raw, f"Could not read shortcuts from {raw!r}: {e!r}") from e


def unstructure_shortcuts(group: Shortcuts) -> dict[str, typing.Any]:
    return {
        "repeats": group.repeats,
        "shortcuts": [shortcuts_converter.unstructure(shortcut, Shortcut) for shortcut in group.shortcuts],
    }


@dataclasses.dataclass(frozen=True)
class Keymap:
    bindings: dict[str, Shortcuts] = dataclasses.field(default_factory=dict)

    def __getitem__(self, action: str) -> Shortcuts:
        return self.bindings[action]

    def __contains__(self, action: str):
        return action in self.bindings

    def actions(self) -> list[str]:
        return list(self.bindings.keys())

    def fired(self, keys: KeyboardInput) -> list[str]:
        fired = [action for action, group in self.bindings.items() if group.pressed(keys)]
        if fired:
            logger.debug("fired: %r", fired)
        return fired

    def describe(self) -> dict[str, str]:
        return {action: str(group) for action, group in self.bindings.items()}

    def encode(self) -> bytes:
        return msgspec.json.encode({action: unstructure_shortcuts(group) for action, group in self.bindings.items()})

    @classmethod
    def from_raw(cls, raw: typing.Any):
        if not isinstance(raw, dict):
            raise MalformedShortcut(raw, f"Expected a table of action names, got {type(raw).__name__}")
        bindings = {}
        for action, group in raw.items():
            try:
                bindings[action] = structure_shortcuts(group)
            except ShortcutDecodeError as e:
                e.add_note(f"while reading shortcuts for {action!r}")
                raise
        return cls(bindings=bindings)

    @classmethod
    def decode(cls, data: typing.Union[bytes, str], format: str = "json"):
        match format:
            case "json":
                decode = msgspec.json.decode
            case "toml":
                decode = msgspec.toml.decode
            case _:
                raise MalformedShortcut(format, f"Unsupported keymap format {format!r}")
        try:
            raw = decode(data)
        except msgspec.DecodeError as e:
            raise MalformedShortcut(str(e), f"Could not parse keymap: {e}") from e
        return cls.from_raw(raw)

    @classmethod
    def load(cls, src: pathlib.Path):
        src = pathlib.Path(src)
        if src.suffix not in FORMATS_BY_SUFFIX:
            raise MalformedShortcut(str(src), f"Don't know how to read a keymap from {src.name}")
        keymap = cls.decode(src.read_bytes(), format=FORMATS_BY_SUFFIX[src.suffix])
        logger.debug("Loaded %d bindings from %s", len(keymap.bindings), src)
        return keymap

    @classmethod
    def for_test(cls):
        return cls.from_raw(TEST_BINDINGS)
