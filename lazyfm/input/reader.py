"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, navigation-key escape forms and control keys.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
INVALID_TOKEN = "INVALID"
_PENDING_BYTES: list[bytes] = []

_CONTROL_TOKENS: dict[bytes, str] = {
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
    b"\x00": "CTRL_SPACE",
}

# ESC [ <final>  and  ESC O <final>
_CSI_FINAL_TOKENS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

# ESC [ <number> ~
_CSI_TILDE_TOKENS: dict[str, str] = {
    "1": "HOME",
    "7": "HOME",
    "4": "END",
    "8": "END",
    "3": "DELETE",
    "2": "INSERT",
    "5": "PAGE_UP",
    "6": "PAGE_DOWN",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> str:
    """Complete a multi-byte UTF-8 character whose first byte is ``lead``.

    Stray continuation bytes and truncated or malformed sequences come back
    as ``INVALID``. A byte that cannot continue the sequence is queued as
    the next key.
    """
    first = lead[0]
    if first >= 0xF8 or first < 0xC0:
        return INVALID_TOKEN
    if first >= 0xF0:
        missing = 3
    elif first >= 0xE0:
        missing = 2
    else:
        missing = 1
    data = lead
    for _ in range(missing):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            return INVALID_TOKEN
        if not 0x80 <= nxt[0] <= 0xBF:
            _PENDING_BYTES.append(nxt)
            return INVALID_TOKEN
        data += nxt
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return INVALID_TOKEN


def _decode_escape(fd: int) -> str:
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    introducer = seq
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in _CSI_FINAL_TOKENS:
        return _CSI_FINAL_TOKENS[seq]
    if introducer == b"O" or not seq.isdigit():
        return "ESC"

    digits = seq.decode("ascii")
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "ESC"
        if part.isdigit():
            digits += part.decode("ascii")
            if len(digits) > 8:
                return "ESC"
            continue
        if part == b"~":
            return _CSI_TILDE_TOKENS.get(digits, "ESC")
        if part == b";":
            # Modified key (e.g. ESC [ 1 ; 5 A); report the bare key.
            _modifier = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if final is None:
                return "ESC"
            if final == b"~":
                return _CSI_TILDE_TOKENS.get(digits, "ESC")
            return _CSI_FINAL_TOKENS.get(final, "ESC")
        return "ESC"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key from ``fd`` and return its token.

    Printable input comes back as the character itself (space is ``" "``);
    control bytes become ``CTRL_<LETTER>``; escape sequences map to named
    tokens such as ``UP`` or ``DELETE``; undecodable bytes become
    ``INVALID``. Returns ``""`` on timeout or EOF.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch in _CONTROL_TOKENS:
        return _CONTROL_TOKENS[ch]
    if ch == b"\x1b":
        return _decode_escape(fd)
    code = ch[0]
    if 1 <= code <= 26:
        return f"CTRL_{chr(code + 64)}"
    if code == 0x1F:
        return "CTRL_QUESTION"
    if code >= 0x80:
        return _read_utf8_tail(fd, ch)
    return ch.decode("utf-8", errors="replace")


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "INVALID_TOKEN", "read_key"]
