# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Matching happens in three layers:
# modifiers: one policy per modifier (ignore, require pressed, require not pressed)
# shortcuts.Shortcut: one key plus a policy for each modifier
# shortcuts.Shortcuts: alternative Shortcuts sharing a trigger mode (repeating or single press)
#
# The host owns the keyboard state; anything with pressed()/just_pressed() will do.

from .commontypes import InvalidModifierTag, MalformedShortcut, ShortcutDecodeError, ShortcutsError, UnknownKeyName
from .config import Keymap, structure_shortcuts, unstructure_shortcuts
from .keycodes import KeyCode, display_token
from .keystate import KeyboardInput, KeyboardState, KeyEvent, KeyPress
from .modifiers import Modifier, ModifierSet, ModifierState
from .shortcuts import Shortcut, Shortcuts, TriggerMode

__all__ = [
    "InvalidModifierTag",
    "KeyCode",
    "KeyEvent",
    "KeyPress",
    "KeyboardInput",
    "KeyboardState",
    "Keymap",
    "MalformedShortcut",
    "Modifier",
    "ModifierSet",
    "ModifierState",
    "Shortcut",
    "ShortcutDecodeError",
    "Shortcuts",
    "ShortcutsError",
    "TriggerMode",
    "UnknownKeyName",
    "display_token",
    "structure_shortcuts",
    "unstructure_shortcuts",
]
