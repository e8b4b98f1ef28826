"""Command line interface for svcdoc-tools."""

from __future__ import annotations

import argparse
import logging
from importlib import metadata
from pathlib import Path
from typing import Callable

from .banner import render_banner
from .codegen_markdown import GeneratedFile, generate_docs
from .config import DocsConfig, load_config
from .model import ServiceModel
from .paths import output_path
from .schema import load_schema

Handler = Callable[[argparse.Namespace], int]

PROG = "svcdoc-tools"

logger = logging.getLogger(__name__)


def _version() -> str:
    try:
        return metadata.version(PROG)
    except metadata.PackageNotFoundError:  # pragma: no cover - source checkout
        return "0.0.0"


def _load_inputs(args: argparse.Namespace) -> tuple[ServiceModel, DocsConfig]:
    model = load_schema(args.schema)
    config = load_config(args.config) if args.config else DocsConfig()
    return model, config


def _handle_gen_docs(args: argparse.Namespace) -> int:
    """Generate the documents and write them below the output directory."""
    try:
        model, config = _load_inputs(args)
    except (OSError, ValueError) as err:
        logger.error("%s", err)
        return 1

    prelude = [] if args.no_banner else render_banner(PROG, _version(), model.source)
    try:
        files = generate_docs(model, config, prelude)
        write_files(files, Path(args.output))
    except (OSError, ValueError) as err:
        logger.error("%s", err)
        return 1
    logger.info("wrote %d document(s) to %s", len(files), args.output)
    return 0


def _handle_paths(args: argparse.Namespace) -> int:
    """Print the output path of every interface document."""
    try:
        model, config = _load_inputs(args)
    except (OSError, ValueError) as err:
        logger.error("%s", err)
        return 1

    for interface in model.interfaces:
        print("/".join(output_path(interface, model, config)))
    return 0


def write_files(files: list[GeneratedFile], root: Path) -> list[Path]:
    """Write *files* below *root*, creating parent directories."""
    written: list[Path] = []
    for generated in files:
        target = root.joinpath(*generated.path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(generated.contents, encoding="utf-8")
        logger.debug("wrote %s", target)
        written.append(target)
    return written


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(prog=PROG)
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen_docs = subparsers.add_parser("gen-docs", help="generate Markdown documentation")
    gen_docs.add_argument("schema", help="schema file (.yml, .yaml or .json)")
    gen_docs.add_argument("-c", "--config", help="TOML configuration file")
    gen_docs.add_argument("-o", "--output", default="docs", help="output directory")
    gen_docs.add_argument(
        "--no-banner",
        action="store_true",
        help="omit the generated-file banner",
    )
    gen_docs.set_defaults(func=_handle_gen_docs)

    paths = subparsers.add_parser("paths", help="list the documents that would be generated")
    paths.add_argument("schema", help="schema file (.yml, .yaml or .json)")
    paths.add_argument("-c", "--config", help="TOML configuration file")
    paths.set_defaults(func=_handle_paths)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    handler: Handler = args.func
    return handler(args)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
