"""Typed dataclasses describing the conversion configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class ConvertConfigError(ValueError):
    """Raised when the conversion configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ScriptureConfig:
    """Description of the app that embeds the converted contents.

    Attributes
    ----------
    app_name : str | None
        Display name of the app.
    program_type : str | None
        Authoring program identifier (for example ``"SAB"``).
    default_lang : str | None
        Lower-cased language used when a caller needs a single language.
    languages : list[str]
        Lower-cased language codes the app ships.
    book_ids : list[str]
        Upper-cased three-letter book ids that reference links may target.
    """

    app_name: str | None = None
    program_type: str | None = None
    default_lang: str | None = None
    languages: list[str] = dc.field(default_factory=list)
    book_ids: list[str] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class ConvertConfig:
    """Fully resolved settings for one conversion run."""

    data_dir: Path = Path("data")
    dest_dir: str = "static/contents"
    output: Path = Path("src/generated/contents.js")
    output_format: str = "js"
    scripture: ScriptureConfig = dc.field(default_factory=ScriptureConfig)


__all__ = ["ConvertConfig", "ConvertConfigError", "ScriptureConfig"]
