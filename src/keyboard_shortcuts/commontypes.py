# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import typing


class ShortcutsError(Exception):
    pass


class ShortcutDecodeError(ShortcutsError):
    kind: typing.ClassVar[str] = "decode error"

    def __init__(self, value: typing.Any, message: typing.Optional[str] = None):
        self.value = value
        if message is None:
            message = f"{self.kind}: {value!r}"
        super().__init__(message)


class UnknownKeyName(ShortcutDecodeError):
    kind = "unknown key name"


class InvalidModifierTag(ShortcutDecodeError):
    kind = "invalid modifier tag"


class MalformedShortcut(ShortcutDecodeError):
    kind = "malformed shortcut"
