# SPDX-License-Identifier: MIT
"""Windows code pages and text transcoding.

Clipboard text lives in two shapes: wide text (``CF_UNICODETEXT``, UTF-16LE
with a two-byte NUL terminator) and legacy single/multi-byte text
(``CF_TEXT``, a regional code page with a one-byte NUL terminator).

Conversions follow the OS converters:
- input is read up to the first terminator
- undecodable input becomes U+FFFD
- unencodable characters become ``?``

The only hard failure is a code page Python has no codec for.
"""

from __future__ import annotations

import codecs
import re
from dataclasses import dataclass

from cclip.core.result import Err, Ok, Result

__all__ = [
    "CP_SJIS",
    "CP_UTF16LE",
    "CP_UTF8",
    "ConversionError",
    "codec_name",
    "codepage_for_encoding",
    "decode",
    "decode_wide",
    "encode",
    "encode_wide",
]

CP_UTF8 = 65001
CP_SJIS = 932
CP_UTF16LE = 1200

# Code pages whose Python codec is not simply "cp<N>".
_CODECS: dict[int, str] = {
    CP_UTF8: "utf-8",
    CP_SJIS: "cp932",
    CP_UTF16LE: "utf-16-le",
    1201: "utf-16-be",
    10000: "mac-roman",
    20127: "ascii",
    20932: "euc-jp",
    28591: "latin-1",
    28592: "iso8859-2",
    28595: "iso8859-5",
    28597: "iso8859-7",
    28605: "iso8859-15",
    50220: "iso2022-jp",
    51949: "euc-kr",
    54936: "gb18030",
}

_WIDE_CODECS = {"utf-16-le", "utf-16-be"}


@dataclass(frozen=True, slots=True)
class ConversionError:
    codepage: int
    message: str


def codec_name(codepage: int) -> str | None:
    """Return the normalized Python codec for a code page, or None."""
    name = _CODECS.get(codepage, f"cp{codepage}")
    try:
        return codecs.lookup(name).name
    except LookupError:
        return None


def codepage_for_encoding(encoding: str) -> int:
    """Map a Python encoding name back to a code page (UTF-8 if unknown)."""
    try:
        name = codecs.lookup(encoding).name
    except LookupError:
        return CP_UTF8

    for codepage, codec in _CODECS.items():
        if codecs.lookup(codec).name == name:
            return codepage

    m = re.fullmatch(r"cp(\d+)", name)
    if m:
        return int(m.group(1))
    return CP_UTF8


def _until_terminator(data: bytes, width: int) -> bytes:
    if width == 1:
        end = data.find(b"\x00")
        return data if end < 0 else data[:end]

    # Wide text: the terminator must sit on a code unit boundary.
    end = data.find(b"\x00\x00")
    while end >= 0 and end % 2:
        end = data.find(b"\x00\x00", end + 1)
    if end < 0:
        return data[: len(data) - len(data) % 2]
    return data[:end]


def decode(data: bytes, codepage: int) -> Result[str, ConversionError]:
    """Decode terminated bytes in ``codepage`` to text."""
    codec = codec_name(codepage)
    if codec is None:
        return Err(ConversionError(codepage, f"unsupported code page {codepage}"))

    width = 2 if codec in _WIDE_CODECS else 1
    try:
        return Ok(_until_terminator(data, width).decode(codec, errors="replace"))
    except UnicodeError as e:
        return Err(ConversionError(codepage, str(e)))


def encode(text: str, codepage: int) -> Result[bytes, ConversionError]:
    """Encode text to ``codepage`` (no terminator)."""
    codec = codec_name(codepage)
    if codec is None:
        return Err(ConversionError(codepage, f"unsupported code page {codepage}"))

    try:
        return Ok(text.encode(codec, errors="replace"))
    except UnicodeError as e:
        return Err(ConversionError(codepage, str(e)))


def decode_wide(data: bytes) -> str:
    """Decode a ``CF_UNICODETEXT`` blob."""
    return _until_terminator(data, 2).decode("utf-16-le", errors="replace")


def encode_wide(text: str) -> bytes:
    """Encode text as a terminated ``CF_UNICODETEXT`` blob."""
    return text.encode("utf-16-le", errors="surrogatepass") + b"\x00\x00"
