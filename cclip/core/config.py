# SPDX-License-Identifier: MIT
"""Tool configuration.

Optional TOML file named by ``CCLIP_CONFIG``; ``CCLIP_VERBOSE`` overrides
the ``verbose`` key. No file means defaults.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping

from cclip.core.codepage import CP_SJIS, CP_UTF8, codec_name

__all__ = ["Config", "ConfigError", "config_path_from_env", "load_config"]

CONFIG_ENV = "CCLIP_CONFIG"
VERBOSE_ENV = "CCLIP_VERBOSE"

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(Exception):
    """Raised when the config file exists but cannot be used."""


@dataclass(frozen=True, slots=True)
class Config:
    legacy_codepage: int = CP_SJIS
    pipe_codepage: int = CP_UTF8
    chunk_size: int = 8192
    verbose: bool = False


def config_path_from_env(environ: Mapping[str, str] | None = None) -> Path | None:
    env = os.environ if environ is None else environ
    raw = env.get(CONFIG_ENV)
    if not raw:
        return None
    return Path(raw).expanduser()


def _codepage(data: Mapping[str, object], key: str, default: int) -> int:
    value = data.get(key, default)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"{key}: expected an integer code page")
    if codec_name(value) is None:
        raise ConfigError(f"{key}: unsupported code page {value}")
    return value


def _parse(data: Mapping[str, object]) -> Config:
    defaults = Config()

    chunk_size = data.get("chunk_size", defaults.chunk_size)
    if not isinstance(chunk_size, int) or isinstance(chunk_size, bool) or chunk_size <= 0:
        raise ConfigError("chunk_size: expected a positive integer")

    verbose = data.get("verbose", defaults.verbose)
    if not isinstance(verbose, bool):
        raise ConfigError("verbose: expected true or false")

    return Config(
        legacy_codepage=_codepage(data, "legacy_codepage", defaults.legacy_codepage),
        pipe_codepage=_codepage(data, "pipe_codepage", defaults.pipe_codepage),
        chunk_size=chunk_size,
        verbose=verbose,
    )


def load_config(
    path: Path | None = None, *, environ: Mapping[str, str] | None = None
) -> Config:
    """Load configuration.

    Raises:
        ConfigError: the file exists but is unreadable or invalid.
    """
    env = os.environ if environ is None else environ

    config = Config()
    if path is not None and path.exists():
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"{path}: {e}") from e
        config = _parse(data)

    verbose = env.get(VERBOSE_ENV)
    if verbose is not None:
        config = replace(config, verbose=verbose.strip().lower() in _TRUTHY)
    return config
