"""Load conversion configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _build_scripture_config, _normalize_format, _optional_str
from .models import ConvertConfig, ConvertConfigError


def load_convert_config(path: Path | None) -> ConvertConfig:
    """Load the YAML configuration describing a contents conversion.

    Parameters
    ----------
    path : Path or None
        Filesystem path to the YAML configuration file. ``None`` returns the
        built-in defaults.

    Returns
    -------
    ConvertConfig
        Parsed configuration with data/destination directories, output
        location and format, and the embedded :class:`ScriptureConfig`.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ConvertConfigError
        If a section or value is invalid (for example, an unknown output
        format or a non-list ``languages`` entry).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from sab_contents.config import load_convert_config
    >>> config = load_convert_config(Path("contents.yaml"))  # doctest: +SKIP
    >>> config.output_format  # doctest: +SKIP
    'js'
    """
    if path is None:
        return ConvertConfig()
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    if not isinstance(defaults, dict):
        msg = "'defaults' configuration must be a mapping."
        raise ConvertConfigError(msg)

    base = ConvertConfig()
    return ConvertConfig(
        data_dir=Path(defaults.get("data_dir", base.data_dir)),
        dest_dir=_optional_str(defaults.get("dest_dir")) or base.dest_dir,
        output=Path(defaults.get("output", base.output)),
        output_format=_normalize_format(defaults.get("format")),
        scripture=_build_scripture_config(raw.get("scripture")),
    )


__all__ = ["load_convert_config"]
