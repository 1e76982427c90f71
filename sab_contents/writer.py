"""Persist a built contents tree for the rendering layer.

``ContentsWriter`` serialises a :class:`~sab_contents.parser.ContentsData`
with msgspec and writes either plain JSON or a JavaScript module rendered from
the ``contents_module.jinja`` template:

>>> from pathlib import Path
>>> from sab_contents.parser import ContentsData
>>> from sab_contents.writer import ContentsWriter
>>> writer = ContentsWriter(Path("build/contents.js"))  # doctest: +SKIP
>>> writer.run(ContentsData())  # doctest: +SKIP
PosixPath('build/contents.js')

The writer expects templates to reside under ``sab_contents/templates`` unless
a custom directory is provided. Output files are UTF-8 encoded and always end
with a newline.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
from jinja2 import Environment, FileSystemLoader

from ._constants import CONTENTS_FILENAME, MODULE_TEMPLATE, OUTPUT_FORMATS

if typ.TYPE_CHECKING:
    from .parser.models import ContentsData


class ContentsWriter:
    """Write the contents payload as JSON or as a JavaScript module."""

    def __init__(
        self,
        output: Path,
        output_format: str = "js",
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the writer and, for module output, its Jinja environment.

        Parameters
        ----------
        output : Path
            Destination file.
        output_format : str, optional
            ``"js"`` (default) for an ES module, ``"json"`` for plain JSON.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.

        Raises
        ------
        ValueError
            If ``output_format`` is not supported.
        """
        if output_format not in OUTPUT_FORMATS:
            msg = f"Unsupported output format '{output_format}'."
            raise ValueError(msg)
        self.output = output
        self.output_format = output_format
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=False,  # noqa: S701 - renders JavaScript, not HTML
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, contents: ContentsData) -> str:
        """Return the serialised document without touching the disk."""
        payload = msgspec_json.format(
            msgspec_json.encode(contents.to_payload()), indent=2
        ).decode("utf-8")
        if self.output_format == "json":
            text = payload
        else:
            template = self.env.get_template(MODULE_TEMPLATE)
            text = template.render(
                payload=payload,
                source_name=CONTENTS_FILENAME,
                generated_at=dt.datetime.now(dt.UTC),
            )
        if not text.endswith("\n"):
            text += "\n"
        return text

    def run(self, contents: ContentsData) -> Path:
        """Render ``contents`` and write it to the configured output path."""
        self.output.parent.mkdir(parents=True, exist_ok=True)
        self.output.write_text(self.render(contents), encoding="utf-8")
        return self.output


__all__ = ["ContentsWriter"]
