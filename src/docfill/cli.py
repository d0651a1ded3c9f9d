"""Command-line interface for docfill."""

import argparse
import asyncio
import json
import logging
import os
import stat
import sys
import tempfile
from pathlib import Path
from typing import Any, Optional

from .config import Settings, settings as default_settings
from .document import read_entry
from .filler import DocumentFiller, FillStrategy
from .llm import PROVIDERS

logger = logging.getLogger(__name__)


class MissingInputError(Exception):
    """Exception raised when a required argument or environment value is absent."""

    pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docfill",
        description="docfill - Fill [placeholders] in a Word document using an LLM",
    )
    parser.add_argument(
        "template", nargs="?", help="Path to the .docx template (default: $TEMPLATE_PATH)"
    )
    parser.add_argument(
        "output", nargs="?", help="Path to write the filled document (default: $OUTPUT_PATH or output.docx)"
    )
    parser.add_argument(
        "value_map", nargs="?", help="Path to the value map, JSON or free text (default: $VALUE_MAP_PATH)"
    )
    parser.add_argument("--provider", choices=PROVIDERS, help="LLM provider (default: $LLM_PROVIDER)")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in FillStrategy],
        help="Resolve all placeholders in one call (batch) or one call each (sequential)",
    )
    parser.add_argument("--window-size", type=int, help="Context characters on each side of a placeholder")
    parser.add_argument(
        "--list", action="store_true", help="List placeholders and their sentences without calling the LLM"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def load_value_map(path: Path) -> Any:
    """Load a value map: .json files are parsed, anything else is free text."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return text


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_atomically(path: Path, data: bytes) -> None:
    """
    Write data to path via a temporary file so no partial output is left behind.

    The result keeps the mode of an existing target, otherwise it gets the
    mode a plain open() would give under the current umask.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.exists():
        mode = stat.S_IMODE(path.stat().st_mode)
    else:
        mode = 0o666 & ~_current_umask()
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as handle:
            os.chmod(tmp_name, mode)
            handle.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def resolve_settings(args: argparse.Namespace, base: Settings) -> Settings:
    """Apply command-line overrides on top of the environment settings."""
    overrides = {}
    if args.provider:
        overrides["llm_provider"] = args.provider
    if args.strategy:
        overrides["fill_strategy"] = args.strategy
    if args.window_size is not None:
        overrides["context_window_size"] = args.window_size
    return base.model_copy(update=overrides)


def resolve_paths(args: argparse.Namespace, config: Settings) -> tuple[Path, Path, Optional[Path]]:
    """Resolve template, output and value map paths from arguments or environment."""
    template = args.template or config.template_path
    if not template:
        raise MissingInputError("Missing template path. Provide as arg or TEMPLATE_PATH env var.")

    output = args.output or config.output_path
    value_map = args.value_map or config.value_map_path
    if not value_map and not args.list:
        raise MissingInputError("Missing value map path. Provide as arg or VALUE_MAP_PATH env var.")

    return Path(template), Path(output), Path(value_map) if value_map else None


async def run_fill(template: Path, output: Path, value_map_path: Path, config: Settings) -> None:
    """Fill the template and write the result."""
    value_map = load_value_map(value_map_path)
    filler = DocumentFiller.from_settings(config)
    try:
        data = await filler.fill_document(
            template.read_bytes(), value_map, entry=config.document_entry
        )
    finally:
        await filler.client.close()

    write_atomically(output, data)
    print(f"Wrote {output}")


def run_list(template: Path, config: Settings) -> None:
    """Print the placeholders of a template with their sentences."""
    markup = read_entry(template.read_bytes(), config.document_entry)
    filler = DocumentFiller.from_settings(config, offline=True)
    extraction, contexts = filler.prepare(markup)

    print(f"{len(contexts)} placeholders in {template}")
    for context in contexts:
        print(f"{context.placeholder.id}: {context.placeholder.name}")
        print(f"    {context.sentence}")
    for warning in extraction.warnings:
        print(f"Warning: {warning}")


def main(argv: Optional[list[str]] = None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = resolve_settings(args, default_settings)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        template, output, value_map_path = resolve_paths(args, config)
    except MissingInputError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    try:
        if args.list:
            run_list(template, config)
        else:
            asyncio.run(run_fill(template, output, value_map_path, config))
    except Exception as e:
        logger.debug("Fill failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
