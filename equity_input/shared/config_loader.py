"""
Configuration loading: YAML overrides applied to Pydantic model defaults.

YAML files may declare `extends: <filename>` to inherit from another YAML in
the same directory; the current file's values always win. The loaded config
is cached per process so the validator and normalizer agree on defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from equity_input.shared.config import Config
from equity_input.shared.dicts import deep_merge_dicts, nest_flat_keys

logger = logging.getLogger(__name__)

_ACTIVE_CONFIG: Config | None = None


def load_config(path: str | Path | None = None, **overrides: Any) -> Config:
    """
    Load configuration from an optional YAML file with optional keyword overrides.

    Resolution order (last wins):
      1. Python field defaults
      2. YAML file (resolved via ``extends`` chain if present)
      3. Keyword overrides, using ``__`` as a nesting separator

    Examples:
        >>> cfg = load_config()
        >>> cfg = load_config("config/precise.yaml")
        >>> cfg = load_config(defaults__iterations=5_000, system__seed=7)

    Raises:
        FileNotFoundError: If ``path`` (or a file it extends) does not exist
        pydantic.ValidationError: If the merged values break a field constraint
    """
    config = Config.default()

    if path is not None:
        config = config.merge(_read_yaml(Path(path), seen=()))
        logger.debug(f"Applied config overrides from {path}")

    if overrides:
        config = config.merge(nest_flat_keys(overrides))

    return config


def _read_yaml(path: Path, seen: tuple[Path, ...]) -> dict[str, Any]:
    """Read a YAML mapping, resolving ``extends`` chains (A extends B extends C)."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    resolved = path.resolve()
    if resolved in seen:
        chain = " -> ".join(str(p) for p in (*seen, resolved))
        raise ValueError(f"Circular extends in config files: {chain}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    parent = data.pop("extends", None)
    if parent is not None:
        base = _read_yaml(path.parent / parent, seen=(*seen, resolved))
        data = deep_merge_dicts(base, data)

    return data


def get_config() -> Config:
    """Return the process-wide config, loading defaults on first use."""
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = Config.default()
    return _ACTIVE_CONFIG


def set_config(config: Config | None) -> None:
    """Replace the process-wide config (``None`` resets to defaults on next use)."""
    global _ACTIVE_CONFIG
    _ACTIVE_CONFIG = config
