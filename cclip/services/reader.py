# SPDX-License-Identifier: MIT
"""Clipboard text -> stdout bytes (cget)."""

from __future__ import annotations

from cclip.core.codepage import decode, decode_wide, encode
from cclip.core.errors import ReaderExit, ToolError
from cclip.core.formats import CF_TEXT, CF_UNICODETEXT
from cclip.core.result import Err, Ok, Result
from cclip.platform.clipboard import ClipboardSession
from cclip.services.base import BaseService

__all__ = ["ReaderService"]


class ReaderService(BaseService):
    """Read clipboard text, transcoded for output."""

    def read_text(self, *, codepage: int) -> Result[bytes, ToolError]:
        """Return clipboard text encoded in ``codepage`` (no terminator).

        The clipboard is released before returning; callers write the
        bytes afterwards.
        """
        match self._clipboard.acquire():
            case Err(e):
                return Err(ToolError(ReaderExit.OPEN_FAILED, "Cannot open clipboard", hint=e.message))
            case Ok(session):
                with session:
                    fetched = self._fetch_text(session)

        match fetched:
            case Err(e):
                return Err(e)
            case Ok(text):
                pass

        match encode(text, codepage):
            case Err(e):
                return Err(
                    ToolError(ReaderExit.CONVERSION_FAILED, "Character conversion failed", hint=e.message)
                )
            case Ok(data):
                self._console.debug(f"{len(data)} bytes for code page {codepage}")
                return Ok(data)

    def _fetch_text(self, session: ClipboardSession) -> Result[str, ToolError]:
        if session.has_format(CF_UNICODETEXT):
            wide = session.get_data(CF_UNICODETEXT)
            if wide is not None:
                self._console.debug("using CF_UNICODETEXT")
                return Ok(decode_wide(wide))

        # Older applications only publish CF_TEXT in the legacy code page.
        if session.has_format(CF_TEXT):
            legacy = session.get_data(CF_TEXT)
            if legacy is not None:
                self._console.debug(f"using CF_TEXT (code page {self._config.legacy_codepage})")
                match decode(legacy, self._config.legacy_codepage):
                    case Err(e):
                        return Err(
                            ToolError(
                                ReaderExit.CONVERSION_FAILED,
                                "Character conversion failed",
                                hint=e.message,
                            )
                        )
                    case Ok(text):
                        return Ok(text)

        return Err(ToolError(ReaderExit.NO_TEXT, "No text data in clipboard"))
