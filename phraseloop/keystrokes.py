# SPDX-License-Identifier: GPL-3.0-only
"""Name keystrokes the way the Linux console reports them.

A keystroke is a plain str: a printable character stands for itself, and
every other key gets a name such as "return", "CTRL-X" or "ALT-uparrow".
Sequences that are not in the tables below still get a name ("CSI-..." or
"SS3-...") so that callers can ignore keys they do not care about.
"""

# Bytes that do not decode as UTF-8 arrive as this keystroke
UNDECODABLE = "undecodable"

CONTROL_NAMES = {
    "\x00": "CTRL-SPACE",
    "\t": "tab",
    "\n": "newline",
    "\r": "return",
    "\x7f": "backspace",
}

CSI_FINAL_NAMES = {
    "A": "uparrow",
    "B": "downarrow",
    "C": "rightarrow",
    "D": "leftarrow",
    "F": "end",
    "H": "home",
    "P": "F1",
    "Q": "F2",
    "R": "F3",
    "S": "F4",
}

CSI_TILDE_NAMES = {
    "2": "insert",
    "3": "delete",
    "5": "pageup",
    "6": "pagedown",
    "15": "F5",
    "17": "F6",
    "18": "F7",
    "19": "F8",
    "20": "F9",
    "21": "F10",
    "23": "F11",
    "24": "F12",
    "200": "pastestart",
    "201": "pasteend",
}


def _modifier_prefix(param: str) -> str | None:
    # xterm encodes modifiers as 1 + (shift | alt << 1 | ctrl << 2)
    try:
        m = int(param) - 1
    except ValueError:
        return None
    if not 0 < m < 8:
        return None
    prefix = ""
    if m & 4:
        prefix += "CTRL-"
    if m & 2:
        prefix += "ALT-"
    if m & 1:
        prefix += "SHIFT-"
    return prefix


def _name_csi(seq: str) -> str:
    final = seq[-1:]
    params = seq[:-1].split(";") if seq[:-1] else []
    if final == "~" and params:
        base = CSI_TILDE_NAMES.get(params[0])
        if base is not None:
            if len(params) == 1:
                return base
            if len(params) == 2:
                prefix = _modifier_prefix(params[1])
                if prefix is not None:
                    return prefix + base
    elif final in CSI_FINAL_NAMES:
        base = CSI_FINAL_NAMES[final]
        if not params:
            return base
        if len(params) == 2 and params[0] == "1":
            prefix = _modifier_prefix(params[1])
            if prefix is not None:
                return prefix + base
    return "CSI-" + seq


def _name_control(s: str) -> str:
    try:
        return CONTROL_NAMES[s]
    except KeyError:
        pass
    o = ord(s)
    if o >= 0x80:
        return "U+%04X" % o
    return "CTRL-" + chr(o + 64)


def is_printable(keystroke: str) -> bool:
    if len(keystroke) != 1:
        return False
    o = ord(keystroke)
    # C0, DEL and C1 control characters
    return 32 <= o and not 0x7f <= o < 0xa0


def parse_one_keystroke(first_char: str, get_next_char) -> str:
    "Parse one Linux console keystroke using rules from console_codes(4)"
    s = first_char
    if not s:
        return ""
    assert len(s) == 1
    if is_printable(s):
        return s
    if s != "\x1b":
        return _name_control(s)
    s = get_next_char()
    if s == "":
        return "escape"
    if s == "[":
        seq = get_next_char()
        if not seq:
            return "ALT-["
        # Parameter and intermediate bytes, then one final byte
        while 0x20 <= ord(seq[-1]) < 0x40:
            ss = get_next_char()
            if not ss:
                break
            seq += ss
        return _name_csi(seq)
    if s == "O":
        s = get_next_char()
        if not s:
            return "ALT-O"
        if s in CSI_FINAL_NAMES:
            return CSI_FINAL_NAMES[s]
        return "SS3-" + s
    if s == "\x1b":
        return "escape"
    if is_printable(s):
        return "ALT-" + s
    return "ALT-" + _name_control(s)
