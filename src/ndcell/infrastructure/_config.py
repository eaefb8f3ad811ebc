"""
Runtime configuration for ndcell.

Configuration is a small process-wide `Config` record initialised from
environment variables and adjustable at runtime:

- ``NDCELL_THREAD_SAFE``   : create cells guarded by a per-cell lock
- ``NDCELL_STRICT_RAGGED`` : raise instead of degrading on ragged literals

A variable is considered enabled unless it is unset or one of ``""``,
``"0"``, ``"false"`` (case-insensitive).
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Iterator, Mapping, Optional

_FALSY = ("", "0", "false")


def _env_flag(name: str, environ: Mapping[str, str]) -> bool:
    return environ.get(name, "0").strip().lower() not in _FALSY


@dataclass(frozen=True)
class Config:
    """
    Process-wide ndcell settings.

    Attributes
    ----------
    thread_safe : bool
        When True, newly created cells serialise reads and writes with their
        own lock, so views shared across threads never race on a cell.
    strict_ragged : bool
        When True, constructing an array from a ragged nested literal raises
        `RaggedShapeError` instead of returning the void array.
    """

    thread_safe: bool = False
    strict_ragged: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a config from ``NDCELL_*`` environment variables."""
        environ = os.environ if environ is None else environ
        return cls(
            thread_safe=_env_flag("NDCELL_THREAD_SAFE", environ),
            strict_ragged=_env_flag("NDCELL_STRICT_RAGGED", environ),
        )


_config = Config.from_env()


def get_config() -> Config:
    """Return the active configuration."""
    return _config


def configure(**overrides: bool) -> Config:
    """
    Replace fields of the active configuration and return the new config.

    Raises
    ------
    TypeError
        If an unknown setting name is given.
    """
    global _config
    known = {f.name for f in fields(Config)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"unknown ndcell setting(s): {', '.join(sorted(unknown))}")
    _config = replace(_config, **overrides)
    return _config


@contextmanager
def config_override(**overrides: bool) -> Iterator[Config]:
    """Temporarily apply `overrides`, restoring the previous config on exit."""
    global _config
    previous = _config
    try:
        yield configure(**overrides)
    finally:
        _config = previous
