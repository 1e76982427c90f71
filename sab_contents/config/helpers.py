"""Utility helpers shared by the conversion config loader."""

from __future__ import annotations

import typing as typ

from sab_contents._constants import OUTPUT_FORMATS

from .models import ConvertConfigError, ScriptureConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_codes(value: object | None, *, field: str, upper: bool = False) -> list[str]:
    """Normalize a list (or whitespace-separated string) of codes."""
    match value:
        case None:
            return []
        case str() as text:
            segments: list[object] = list(text.split())
        case list() | tuple():
            segments = list(value)
        case _:
            msg = f"'{field}' must be a list of codes."
            raise ConvertConfigError(msg)
    normalized: list[str] = []
    for segment in segments:
        code = str(segment).strip()
        if not code:
            continue
        code = code.upper() if upper else code.lower()
        if code not in normalized:
            normalized.append(code)
    return normalized


def _normalize_format(value: object | None) -> str:
    """Return a supported output format, defaulting to ``js``."""
    text = (_optional_str(value) or "js").lower()
    if text not in OUTPUT_FORMATS:
        supported = ", ".join(OUTPUT_FORMATS)
        msg = f"Unknown output format '{text}'. Supported formats: {supported}"
        raise ConvertConfigError(msg)
    return text


def _build_scripture_config(payload: typ.Mapping[str, typ.Any] | None) -> ScriptureConfig:
    """Build a ScriptureConfig instance from the provided mapping payload."""
    if not payload:
        return ScriptureConfig()
    if not isinstance(payload, dict):
        msg = "'scripture' configuration must be a mapping."
        raise ConvertConfigError(msg)
    default_lang = _optional_str(payload.get("default_lang"))
    return ScriptureConfig(
        app_name=_optional_str(payload.get("app_name")),
        program_type=_optional_str(payload.get("program_type")),
        default_lang=default_lang.lower() if default_lang else None,
        languages=_normalize_codes(payload.get("languages"), field="languages"),
        book_ids=_normalize_codes(payload.get("book_ids"), field="book_ids", upper=True),
    )


__all__ = [
    "_build_scripture_config",
    "_normalize_codes",
    "_normalize_format",
    "_optional_str",
]
