"""Low-level terminal input decoding.

Reads raw bytes from the tty and translates them into normalized key tokens.
Handles ESC-sequence timing, UTF-8 multibyte characters, and SGR mouse reports.
"""

from __future__ import annotations

import os
import select

from ..errors import InputClosedError

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

# Tokens for input that is not a key press; the dispatcher ignores them.
MOUSE_TOKEN = "MOUSE"
UNKNOWN_TOKEN = "UNKNOWN"


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> str:
    first = lead[0]
    if first >= 0xF0:
        needed = 3
    elif first >= 0xE0:
        needed = 2
    elif first >= 0xC0:
        needed = 1
    else:
        needed = 0
    data = lead
    for _ in range(needed):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        data += part
    return data.decode("utf-8", errors="replace")


def _skip_csi_tail(fd: int, final: bytes) -> None:
    # Drain parameter bytes until a final byte in 0x40..0x7e.
    seq = final
    count = 0
    while not (0x40 <= seq[0] <= 0x7E):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None or count > 32:
            return
        seq = part
        count += 1


def read_key(fd: int) -> str:
    """Block until one key arrives on ``fd`` and return its token.

    Raises ``InputClosedError`` when the stream reports end of file.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        ch = os.read(fd, 1)
        if not ch:
            raise InputClosedError()

    if ch == b"\x03":
        return "CTRL_C"
    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"
    if ch == b"\t":
        return "TAB"
    if ch == b"\r":
        return "ENTER_CR"
    if ch == b"\n":
        return "ENTER_LF"

    if ch != b"\x1b":
        if ch[0] < 0x20:
            return UNKNOWN_TOKEN
        return _read_utf8_tail(fd, ch)

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"O":
        # SS3 arrows sent in application cursor mode.
        seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if seq == b"A":
            return "UP"
        if seq == b"B":
            return "DOWN"
        return UNKNOWN_TOKEN
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"A":
        return "UP"
    if seq == b"B":
        return "DOWN"
    if seq == b"C":
        return "RIGHT"
    if seq == b"D":
        return "LEFT"
    if seq == b"<":
        # SGR mouse: ESC [ < btn ; col ; row (M/m)
        count = 0
        while True:
            part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if part is None or part in {b"M", b"m"}:
                break
            count += 1
            if count > 64:
                break
        return MOUSE_TOKEN
    _skip_csi_tail(fd, seq)
    return UNKNOWN_TOKEN


__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "MOUSE_TOKEN",
    "UNKNOWN_TOKEN",
    "_PENDING_BYTES",
    "read_key",
]
