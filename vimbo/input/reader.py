"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, Meta/Alt chords, and multi-byte UTF-8 input.
Bytes that decode to no known key yield ``"UNKNOWN"``.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x15": "CTRL_U",
    b"\x17": "CTRL_W",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_CSI_TILDE_KEYS: dict[bytes, str] = {
    b"1": "HOME",
    b"3": "DELETE",
    b"4": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
    b"7": "HOME",
    b"8": "END",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_sequence_length(lead: int) -> int:
    """Return the encoded length for ``lead``, or 0 when it cannot start a character."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _decode_text_byte(fd: int, ch: bytes) -> str | None:
    """Decode one character, pulling UTF-8 continuation bytes.

    Returns ``None`` for bytes that do not form a valid character. A byte that
    breaks a sequence early is pushed back so the next key is not lost.
    """
    needed = _utf8_sequence_length(ch[0])
    if needed == 0:
        return None
    data = ch
    for _ in range(needed - 1):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return None
        if not 0x80 <= part[0] <= 0xBF:
            _PENDING_BYTES.append(part)
            return None
        data += part
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def _read_csi(fd: int) -> str:
    """Decode the remainder of an ``ESC [`` sequence.

    Parameter and intermediate bytes are collected until a final byte
    (``0x40``-``0x7E``) arrives; unmapped finals yield ``"UNKNOWN"``.
    """
    params = b""
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "ALT_[" if not params else "UNKNOWN"
        if part == b"~":
            # Modifier suffixes such as ``5;5~`` keep the base key.
            base = params.split(b";", 1)[0]
            return _CSI_TILDE_KEYS.get(base, "UNKNOWN")
        if 0x40 <= part[0] <= 0x7E:
            return _CSI_FINAL_KEYS.get(part, "UNKNOWN")
        if not 0x20 <= part[0] <= 0x3F:
            return "UNKNOWN"
        params += part
        if len(params) > 16:
            return "UNKNOWN"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token, or ``""`` when nothing arrived within ``timeout_ms``."""
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

    control = _CONTROL_KEYS.get(ch)
    if control is not None:
        return control

    if ch != b"\x1b":
        text = _decode_text_byte(fd, ch)
        return "UNKNOWN" if text is None else text

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"[":
        return _read_csi(fd)
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ALT_O"
        return _CSI_FINAL_KEYS.get(final, "UNKNOWN")
    if seq == b"\x1b":
        _PENDING_BYTES.append(seq)
        return "ESC"
    # Meta plus a control key (Alt+Backspace, Alt+Enter) keeps the base key.
    control = _CONTROL_KEYS.get(seq)
    if control is not None:
        return control
    text = _decode_text_byte(fd, seq)
    if text is not None and text.isprintable():
        return f"ALT_{text}"
    return "UNKNOWN"
