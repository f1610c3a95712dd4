"""Base service class with common initialization."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cclip.core.config import Config
    from cclip.output.console import ConsoleProtocol
    from cclip.platform.clipboard import ClipboardProtocol


class BaseService:
    """Base class for services that need the clipboard, config, and console."""

    def __init__(
        self,
        *,
        clipboard: ClipboardProtocol,
        config: Config,
        console: ConsoleProtocol,
    ) -> None:
        self._clipboard = clipboard
        self._config = config
        self._console = console
