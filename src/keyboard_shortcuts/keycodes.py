# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import enum
import string

from .commontypes import UnknownKeyName

# Key names follow the physical key positions of the UI Events KeyboardEvent code
# values (https://www.w3.org/TR/uievents-code/), so KeyA is the key in the A position
# on a US QWERTY layout, regardless of what the active layout types with it.


@enum.unique
class KeyCode(enum.Enum):
    # Alphanumeric section
    Backquote = "Backquote"
    Backslash = "Backslash"
    BracketLeft = "BracketLeft"
    BracketRight = "BracketRight"
    Comma = "Comma"
    Digit0 = "Digit0"
    Digit1 = "Digit1"
    Digit2 = "Digit2"
    Digit3 = "Digit3"
    Digit4 = "Digit4"
    Digit5 = "Digit5"
    Digit6 = "Digit6"
    Digit7 = "Digit7"
    Digit8 = "Digit8"
    Digit9 = "Digit9"
    Equal = "Equal"
    IntlBackslash = "IntlBackslash"
    IntlRo = "IntlRo"
    IntlYen = "IntlYen"
    KeyA = "KeyA"
    KeyB = "KeyB"
    KeyC = "KeyC"
    KeyD = "KeyD"
    KeyE = "KeyE"
    KeyF = "KeyF"
    KeyG = "KeyG"
    KeyH = "KeyH"
    KeyI = "KeyI"
    KeyJ = "KeyJ"
    KeyK = "KeyK"
    KeyL = "KeyL"
    KeyM = "KeyM"
    KeyN = "KeyN"
    KeyO = "KeyO"
    KeyP = "KeyP"
    KeyQ = "KeyQ"
    KeyR = "KeyR"
    KeyS = "KeyS"
    KeyT = "KeyT"
    KeyU = "KeyU"
    KeyV = "KeyV"
    KeyW = "KeyW"
    KeyX = "KeyX"
    KeyY = "KeyY"
    KeyZ = "KeyZ"
    Minus = "Minus"
    Period = "Period"
    Quote = "Quote"
    Semicolon = "Semicolon"
    Slash = "Slash"
    # Functional keys in the alphanumeric section
    AltLeft = "AltLeft"
    AltRight = "AltRight"
    Backspace = "Backspace"
    CapsLock = "CapsLock"
    ContextMenu = "ContextMenu"
    ControlLeft = "ControlLeft"
    ControlRight = "ControlRight"
    Enter = "Enter"
    SuperLeft = "SuperLeft"
    SuperRight = "SuperRight"
    ShiftLeft = "ShiftLeft"
    ShiftRight = "ShiftRight"
    Space = "Space"
    Tab = "Tab"
    Convert = "Convert"
    KanaMode = "KanaMode"
    Lang1 = "Lang1"
    Lang2 = "Lang2"
    Lang3 = "Lang3"
    Lang4 = "Lang4"
    Lang5 = "Lang5"
    NonConvert = "NonConvert"
    Hiragana = "Hiragana"
    Katakana = "Katakana"
    # Control pad
    Delete = "Delete"
    End = "End"
    Help = "Help"
    Home = "Home"
    Insert = "Insert"
    PageDown = "PageDown"
    PageUp = "PageUp"
    # Arrow pad
    ArrowDown = "ArrowDown"
    ArrowLeft = "ArrowLeft"
    ArrowRight = "ArrowRight"
    ArrowUp = "ArrowUp"
    # Numpad
    NumLock = "NumLock"
    Numpad0 = "Numpad0"
    Numpad1 = "Numpad1"
    Numpad2 = "Numpad2"
    Numpad3 = "Numpad3"
    Numpad4 = "Numpad4"
    Numpad5 = "Numpad5"
    Numpad6 = "Numpad6"
    Numpad7 = "Numpad7"
    Numpad8 = "Numpad8"
    Numpad9 = "Numpad9"
    NumpadAdd = "NumpadAdd"
    NumpadBackspace = "NumpadBackspace"
    NumpadClear = "NumpadClear"
    NumpadClearEntry = "NumpadClearEntry"
    NumpadComma = "NumpadComma"
    NumpadDecimal = "NumpadDecimal"
    NumpadDivide = "NumpadDivide"
    NumpadEnter = "NumpadEnter"
    NumpadEqual = "NumpadEqual"
    NumpadHash = "NumpadHash"
    NumpadMemoryAdd = "NumpadMemoryAdd"
    NumpadMemoryClear = "NumpadMemoryClear"
    NumpadMemoryRecall = "NumpadMemoryRecall"
    NumpadMemoryStore = "NumpadMemoryStore"
    NumpadMemorySubtract = "NumpadMemorySubtract"
    NumpadMultiply = "NumpadMultiply"
    NumpadParenLeft = "NumpadParenLeft"
    NumpadParenRight = "NumpadParenRight"
    NumpadStar = "NumpadStar"
    NumpadSubtract = "NumpadSubtract"
    # Function section
    Escape = "Escape"
    Fn = "Fn"
    FnLock = "FnLock"
    PrintScreen = "PrintScreen"
    ScrollLock = "ScrollLock"
    Pause = "Pause"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    F13 = "F13"
    F14 = "F14"
    F15 = "F15"
    F16 = "F16"
    F17 = "F17"
    F18 = "F18"
    F19 = "F19"
    F20 = "F20"
    F21 = "F21"
    F22 = "F22"
    F23 = "F23"
    F24 = "F24"
    F25 = "F25"
    F26 = "F26"
    F27 = "F27"
    F28 = "F28"
    F29 = "F29"
    F30 = "F30"
    F31 = "F31"
    F32 = "F32"
    F33 = "F33"
    F34 = "F34"
    F35 = "F35"
    # Media and browser keys
    BrowserBack = "BrowserBack"
    BrowserFavorites = "BrowserFavorites"
    BrowserForward = "BrowserForward"
    BrowserHome = "BrowserHome"
    BrowserRefresh = "BrowserRefresh"
    BrowserSearch = "BrowserSearch"
    BrowserStop = "BrowserStop"
    Eject = "Eject"
    LaunchApp1 = "LaunchApp1"
    LaunchApp2 = "LaunchApp2"
    LaunchMail = "LaunchMail"
    MediaPlayPause = "MediaPlayPause"
    MediaSelect = "MediaSelect"
    MediaStop = "MediaStop"
    MediaTrackNext = "MediaTrackNext"
    MediaTrackPrevious = "MediaTrackPrevious"
    Power = "Power"
    Sleep = "Sleep"
    AudioVolumeDown = "AudioVolumeDown"
    AudioVolumeMute = "AudioVolumeMute"
    AudioVolumeUp = "AudioVolumeUp"
    WakeUp = "WakeUp"
    # Legacy, non-standard and application keys
    Meta = "Meta"
    Hyper = "Hyper"
    Turbo = "Turbo"
    Abort = "Abort"
    Resume = "Resume"
    Suspend = "Suspend"
    Again = "Again"
    Copy = "Copy"
    Cut = "Cut"
    Find = "Find"
    Open = "Open"
    Paste = "Paste"
    Props = "Props"
    Select = "Select"
    Undo = "Undo"

    @classmethod
    def from_name(cls, name) -> "KeyCode":
        if not isinstance(name, str) or name not in cls.__members__:
            raise UnknownKeyName(name)
        return cls[name]


# Keys whose display token is the same as their name (Home, End, Pause, F1, ...) are
# left out; display_token falls back to the name for them.
DISPLAY_TOKENS: dict[KeyCode, str] = {
    # Punctuation shows the character it types on a US layout
    KeyCode.Backquote: "`",
    KeyCode.Backslash: "\\",
    KeyCode.BracketLeft: "[",
    KeyCode.BracketRight: "]",
    KeyCode.Comma: ",",
    KeyCode.Equal: "=",
    KeyCode.Minus: "-",
    KeyCode.Period: ".",
    KeyCode.Quote: "'",
    KeyCode.Semicolon: ";",
    KeyCode.Slash: "/",
    KeyCode.IntlBackslash: "Intl \\",
    KeyCode.IntlRo: "Ro",
    KeyCode.IntlYen: "¥",
    KeyCode.Backspace: "⌫",
    KeyCode.Delete: "⌦",
    KeyCode.Enter: "↵",
    KeyCode.Escape: "Esc",
    KeyCode.Tab: "⇥",
    KeyCode.ArrowUp: "↑",
    KeyCode.ArrowDown: "↓",
    KeyCode.ArrowLeft: "←",
    KeyCode.ArrowRight: "→",
    KeyCode.PageUp: "PgUp",
    KeyCode.PageDown: "PgDn",
    KeyCode.PrintScreen: "PrtScr",
    KeyCode.ContextMenu: "Menu",
    KeyCode.KanaMode: "Kana",
    KeyCode.NumpadAdd: "Num +",
    KeyCode.NumpadSubtract: "Num -",
    KeyCode.NumpadMultiply: "Num *",
    KeyCode.NumpadDivide: "Num /",
    KeyCode.NumpadDecimal: "Num .",
    KeyCode.NumpadEqual: "Num =",
    KeyCode.NumpadEnter: "Num Enter",
    KeyCode.NumpadComma: "Num ,",
    KeyCode.NumpadBackspace: "Num ⌫",
    KeyCode.NumpadClear: "Num Clear",
    KeyCode.NumpadClearEntry: "Num CE",
    KeyCode.NumpadHash: "Num #",
    KeyCode.NumpadParenLeft: "Num (",
    KeyCode.NumpadParenRight: "Num )",
    KeyCode.NumpadStar: "Num *",
    KeyCode.NumpadMemoryAdd: "Num M+",
    KeyCode.NumpadMemoryClear: "Num MC",
    KeyCode.NumpadMemoryRecall: "Num MR",
    KeyCode.NumpadMemoryStore: "Num MS",
    KeyCode.NumpadMemorySubtract: "Num M-",
    KeyCode.MediaPlayPause: "Play/Pause",
    KeyCode.MediaStop: "Stop",
    KeyCode.MediaTrackNext: "Next Track",
    KeyCode.MediaTrackPrevious: "Prev Track",
    KeyCode.MediaSelect: "Media Select",
    KeyCode.AudioVolumeUp: "Vol+",
    KeyCode.AudioVolumeDown: "Vol-",
    KeyCode.AudioVolumeMute: "Mute",
    KeyCode.BrowserBack: "Browser Back",
    KeyCode.BrowserForward: "Browser Forward",
    KeyCode.BrowserRefresh: "Refresh",
    KeyCode.BrowserStop: "Browser Stop",
    KeyCode.BrowserSearch: "Browser Search",
    KeyCode.BrowserFavorites: "Favorites",
    KeyCode.BrowserHome: "Browser Home",
    KeyCode.LaunchMail: "Mail",
    KeyCode.LaunchApp1: "App1",
    KeyCode.LaunchApp2: "App2",
    KeyCode.Eject: "⏏",
    KeyCode.ControlLeft: "Ctrl",
    KeyCode.ControlRight: "Ctrl",
    KeyCode.AltLeft: "Alt",
    KeyCode.AltRight: "Alt",
    KeyCode.ShiftLeft: "Shift",
    KeyCode.ShiftRight: "Shift",
    KeyCode.SuperLeft: "Super",
    KeyCode.SuperRight: "Super",
}
DISPLAY_TOKENS.update({KeyCode[f"Key{letter}"]: letter for letter in string.ascii_uppercase})
DISPLAY_TOKENS.update({KeyCode[f"Digit{digit}"]: digit for digit in string.digits})
DISPLAY_TOKENS.update({KeyCode[f"Numpad{digit}"]: f"Num {digit}" for digit in string.digits})


def display_token(key: KeyCode) -> str:
    return DISPLAY_TOKENS.get(key, key.name)
