# SPDX-License-Identifier: MIT
"""Clipboard format listing (cinfo)."""

from __future__ import annotations

from cclip.core.codepage import encode
from cclip.core.errors import InspectorExit, ToolError
from cclip.core.formats import CUSTOM_FORMAT_BASE, FormatDescriptor, resolve_format_name
from cclip.core.result import Err, Ok, Result
from cclip.platform.clipboard import ClipboardSession
from cclip.services.base import BaseService

__all__ = ["InspectorService", "render_report"]

LAZY_MARKER = "(lazy rendering)"


def render_report(descriptors: list[FormatDescriptor]) -> str:
    lines = ["Clipboard formats", ""]
    for d in descriptors:
        size = LAZY_MARKER if d.is_lazy else f"{d.size} bytes"
        lines.append(f"{d.index}. {d.name}")
        lines.append(f"   - type: {d.category.value}")
        lines.append(f"   - size: {size}")
        lines.append("")
    lines.append(f"{len(descriptors)} format(s) found.")
    return "\n".join(lines) + "\n"


class InspectorService(BaseService):
    """Enumerate clipboard formats with names and sizes."""

    def list_formats(self) -> Result[list[FormatDescriptor], ToolError]:
        match self._clipboard.acquire():
            case Err(e):
                return Err(ToolError(InspectorExit.OPEN_FAILED, "Cannot open clipboard", hint=e.message))
            case Ok(session):
                with session:
                    descriptors = self._describe_all(session)

        if not descriptors:
            return Err(ToolError(InspectorExit.NO_FORMATS, "No formats found in clipboard"))
        return Ok(descriptors)

    def report(self, descriptors: list[FormatDescriptor], *, codepage: int) -> bytes:
        """Render the report in ``codepage``.

        Falls back to the pipe code page when ``codepage`` has no codec.
        """
        text = render_report(descriptors)
        match encode(text, codepage):
            case Ok(data):
                return data
            case Err(e):
                self._console.warning(f"{e.message}; writing code page {self._config.pipe_codepage}")

        match encode(text, self._config.pipe_codepage):
            case Ok(data):
                return data
            case Err(_):
                return text.encode("utf-8", errors="replace")

    def _describe_all(self, session: ClipboardSession) -> list[FormatDescriptor]:
        descriptors: list[FormatDescriptor] = []
        for format_id in session.formats():
            registered = session.format_name(format_id) if format_id >= CUSTOM_FORMAT_BASE else None
            name, category = resolve_format_name(format_id, registered)
            descriptors.append(
                FormatDescriptor(
                    index=len(descriptors) + 1,
                    format_id=format_id,
                    name=name,
                    category=category,
                    size=session.data_size(format_id),
                )
            )
        return descriptors
