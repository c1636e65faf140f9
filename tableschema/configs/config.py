"""
Data-source configuration.

All tuneable behaviour of the row sources lives here.  Pass a
``DataSourceConfig`` to a source rather than toggling flags inline.

Usage:
    from tableschema.configs.config import DataSourceConfig, load_config
    cfg = DataSourceConfig()                        # env / defaults
    cfg = DataSourceConfig(copy_rows=False)
    cfg = load_config(".env", validate_row_shape=True)

Environment overrides are read when the config object is constructed.
``load_config`` additionally loads a ``.env`` file first; variables already
present in the environment win over the file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from dotenv import load_dotenv

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable (``true/1/yes/on``, case-insensitive)."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(slots=True)
class DataSourceConfig:
    """
    Runtime configuration for row sources.

    Attributes:
        copy_rows: If True, ``next_row`` hands back a fresh list per call so
            callers can't reach into the source's stored rows.  If False the
            stored row object itself is returned.
        validate_row_shape: If True, sources check at construction that every
            row has the same field count as the first and raise
            ``AlignmentError`` otherwise.  Ragged rows are allowed by default.
    """

    copy_rows: bool = field(
        default_factory=lambda: env_flag("TABLESCHEMA_COPY_ROWS", True)
    )
    validate_row_shape: bool = field(
        default_factory=lambda: env_flag("TABLESCHEMA_VALIDATE_ROW_SHAPE", False)
    )


def load_config(env_file: Path | str | None = None, **overrides) -> DataSourceConfig:
    """
    Build a ``DataSourceConfig`` from a ``.env`` file, the environment and overrides.

    Priority order for each setting:
      1. Keyword override
      2. Environment variable already set in the process
      3. Value from ``env_file``
      4. ``DataSourceConfig`` default

    Raises:
        TypeError: If an override names a field ``DataSourceConfig`` doesn't have.
    """
    if env_file is not None:
        load_dotenv(env_file, override=False)
    return replace(DataSourceConfig(), **overrides)
