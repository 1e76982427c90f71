"""Load and validate conversion configuration YAML.

This subpackage parses the project's ``contents.yaml`` file, applies defaults
for the data, destination, and output locations, and produces typed
dataclasses (:class:`ConvertConfig`, :class:`ScriptureConfig`) that the tree
builder and CLI consume. The primary entry point is
:func:`load_convert_config`.

Examples
--------
>>> from pathlib import Path
>>> from sab_contents.config import load_convert_config
>>> config = load_convert_config(Path("contents.yaml"))  # doctest: +SKIP
>>> config.scripture.book_ids  # doctest: +SKIP
['MAT', 'MRK']
"""

from .loader import load_convert_config
from .models import ConvertConfig, ConvertConfigError, ScriptureConfig

__all__ = [
    "ConvertConfig",
    "ConvertConfigError",
    "ScriptureConfig",
    "load_convert_config",
]
