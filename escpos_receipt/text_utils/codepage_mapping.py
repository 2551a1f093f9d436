"""Codepage names to Python codecs, and encoding of the finished stream."""

from __future__ import annotations

import codecs
import logging

from ..const import DEFAULT_CODEPAGE

_LOGGER = logging.getLogger(__name__)

# Single-byte codepages commonly selectable on receipt printers, keyed by the
# normalized name (upper case, "_" for "-", no spaces)
CODEPAGE_TO_CODEC: dict[str, str] = {
    "CP437": "cp437",
    "CP850": "cp850",
    "CP852": "cp852",
    "CP858": "cp858",
    "CP860": "cp860",
    "CP1252": "cp1252",
    "ISO_8859_1": "iso-8859-1",
    "ISO_8859_15": "iso-8859-15",
    "LATIN1": "latin-1",
}


def get_codec_name(codepage: str) -> str | None:
    """Python codec for a printer codepage name, or None if there is none."""
    key = codepage.upper().replace("-", "_").replace(" ", "")
    if key in CODEPAGE_TO_CODEC:
        return CODEPAGE_TO_CODEC[key]
    try:
        return codecs.lookup(codepage).name
    except LookupError:
        return None


def encode_text(data: str, codepage: str | None = None, replace_char: str = "?") -> bytes:
    """Encode printable text with the printer's codepage.

    Args:
        data: Text fragment (may contain line feeds).
        codepage: Target codepage name; defaults to ISO_8859-1.
        replace_char: Substitute for characters the codepage lacks.

    Returns:
        Encoded bytes.
    """
    codec = get_codec_name(codepage or DEFAULT_CODEPAGE)
    if codec is None:
        _LOGGER.warning("Unknown codepage '%s', using %s", codepage, DEFAULT_CODEPAGE)
        codec = CODEPAGE_TO_CODEC["ISO_8859_1"]

    out = bytearray()
    for char in data:
        if char < "\x80":
            out.append(ord(char))
            continue
        try:
            out.extend(char.encode(codec))
        except UnicodeEncodeError:
            out.extend(replace_char.encode("ascii", errors="replace"))
    return bytes(out)


def encode_command(data: str, replace_char: str = "?") -> bytes:
    """Encode a command fragment byte for byte.

    Characters above U+00FF cannot stand for a byte and become ``replace_char``.
    """
    if all(char <= "\xff" for char in data):
        return data.encode("latin-1")
    _LOGGER.warning("Command fragment %r contains non-byte characters", data)
    return "".join(char if char <= "\xff" else replace_char for char in data).encode("latin-1")
