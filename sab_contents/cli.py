"""Cyclopts CLI entrypoint for converting ``contents.xml`` exports.

The ``contents`` console script defined here reads the ``contents.xml`` menu
export from an app data directory, builds the typed contents tree, and writes
it as a JavaScript module (or JSON) for the rendering layer. ``contents
check`` builds the same tree and reports links whose targets do not match
their type.

Examples
--------
Convert using ``contents.yaml`` from the working directory:

>>> from sab_contents.cli import main
>>> main()  # doctest: +SKIP

Convert a specific data directory to JSON:

>>> from sab_contents.cli import app
>>> app(
...     ["convert", "--data-dir", "data", "--output", "contents.json",
...      "--format", "json"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import ConvertConfig, load_convert_config
from .config.helpers import _normalize_format
from .logging_setup import configure_logging
from .parser.links import link_target_is_valid
from .tree_builder import ContentsTreeBuilder
from .writer import ContentsWriter

DEFAULT_CONFIG = Path("contents.yaml")

app = App(name="contents", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_config(
    config: Path | None,
    *,
    data_dir: Path | None,
    dest_dir: str | None,
    output: Path | None = None,
    output_format: str | None = None,
) -> ConvertConfig:
    """Load the config file (if any) and apply command-line overrides."""
    if config is None and DEFAULT_CONFIG.exists():
        config = DEFAULT_CONFIG
    resolved = load_convert_config(config)
    if data_dir is not None:
        resolved.data_dir = data_dir
    if dest_dir is not None:
        resolved.dest_dir = dest_dir
    if output is not None:
        resolved.output = output
    if output_format is not None:
        resolved.output_format = _normalize_format(output_format)
    return resolved


def _builder_for(resolved: ConvertConfig) -> ContentsTreeBuilder:
    return ContentsTreeBuilder(
        resolved.data_dir,
        resolved.dest_dir,
        scripture_config=resolved.scripture,
    )


@app.command(help="Convert contents.xml into the contents module for the app.")
def convert(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to contents.yaml", env_var="INPUT_CONFIG")
    ] = None,
    data_dir: typ.Annotated[
        Path | None,
        Parameter(help="Directory holding contents.xml", env_var="INPUT_DATA_DIR"),
    ] = None,
    dest_dir: typ.Annotated[
        str | None,
        Parameter(help="Destination prefix for audio paths", env_var="INPUT_DEST_DIR"),
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Output file", env_var="INPUT_OUTPUT")
    ] = None,
    output_format: typ.Annotated[
        str | None,
        Parameter(name="--format", help="js or json", env_var="INPUT_FORMAT"),
    ] = None,
    verbose: typ.Annotated[int, Parameter(help="Logging verbosity (0-2)")] = 0,
) -> None:
    """Build the contents tree and write it to the configured output.

    Parameters
    ----------
    config : Path or None, optional
        Path to the YAML configuration; ``contents.yaml`` is used when present
        and built-in defaults otherwise.
    data_dir : Path or None, optional
        Override the directory holding ``contents.xml``.
    dest_dir : str or None, optional
        Override the destination prefix written into audio paths.
    output : Path or None, optional
        Override the output file.
    output_format : str or None, optional
        Override the output format (``js`` or ``json``).
    verbose : int, optional
        ``1`` logs progress, ``2`` adds per-item detail.

    Returns
    -------
    None
        Writes the output file and prints its path.

    Raises
    ------
    FileNotFoundError
        If the config file or ``contents.xml`` is missing.
    ContentsParseError
        If ``contents.xml`` is malformed.
    """
    configure_logging(verbose)
    resolved = _resolve_config(
        config,
        data_dir=data_dir,
        dest_dir=dest_dir,
        output=output,
        output_format=output_format,
    )
    contents = _builder_for(resolved).run()
    written = ContentsWriter(resolved.output, resolved.output_format).run(contents)
    print(f"wrote {_format_path(written)}")


@app.command(help="Report items whose link target does not match the link type.")
def check(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to contents.yaml", env_var="INPUT_CONFIG")
    ] = None,
    data_dir: typ.Annotated[
        Path | None,
        Parameter(help="Directory holding contents.xml", env_var="INPUT_DATA_DIR"),
    ] = None,
    verbose: typ.Annotated[int, Parameter(help="Logging verbosity (0-2)")] = 0,
) -> None:
    """Validate every item's link and exit non-zero when any is malformed."""
    configure_logging(verbose)
    resolved = _resolve_config(config, data_dir=data_dir, dest_dir=None)
    contents = _builder_for(resolved).run()
    invalid = [
        item
        for item in contents.walk()
        if not link_target_is_valid(item.link, resolved.scripture)
    ]
    for item in invalid:
        link = item.link
        print(f"item {item.id}: invalid {link.link_type} target {link.link_target!r}")
    if invalid:
        raise SystemExit(1)
    print("all links valid")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``contents`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
