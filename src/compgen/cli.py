"""Command line interface for the compgen generators."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from .config import GenerationConfig, load_defaults
from .errors import GenerationError
from .generator import ComponentGenerator
from .scaffold import ComponentScaffolder
from .variants import FileKind, Framework, Language, Style

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path(".compgen.toml")


def _add_variant_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--native",
        dest="framework",
        action="store_const",
        const=Framework.NATIVE.value,
        help="Generate React Native components",
    )
    parser.add_argument(
        "--functional",
        dest="style",
        action="store_const",
        const=Style.FUNCTIONAL.value,
        help="Generate functional instead of class components",
    )
    parser.add_argument(
        "--typescript",
        dest="language",
        action="store_const",
        const=Language.TYPESCRIPT.value,
        help="Generate TypeScript sources",
    )
    parser.add_argument(
        "--props",
        dest="with_props",
        action="store_const",
        const=True,
        help="Add prop-types validation scaffolding",
    )
    parser.add_argument(
        "--uppercase",
        dest="upper_case_file",
        action="store_const",
        const=True,
        help="Name component files after the normalised identifier",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_FILE,
        help="TOML file with a [compgen] table of option defaults",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate React component scaffolding")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    component_parser = subparsers.add_parser("component", help="create component folders")
    component_parser.add_argument("names", nargs="+", metavar="NAME", help="Component names")
    _add_variant_arguments(component_parser)
    component_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Directory in which component folders are created",
    )
    component_parser.add_argument(
        "--stories", action="store_true", help="Also create a storybook story file"
    )
    component_parser.add_argument(
        "--no-test", dest="test", action="store_false", help="Do not create a test file"
    )
    component_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files instead of failing",
    )

    index_parser = subparsers.add_parser(
        "index", help="create an index file re-exporting every sub-folder"
    )
    index_parser.add_argument("directory", type=Path, help="Directory holding component folders")
    index_parser.add_argument(
        "--typescript",
        dest="language",
        action="store_const",
        const=Language.TYPESCRIPT.value,
        default=Language.PLAIN.value,
        help="Write index.ts instead of index.js",
    )
    index_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite an existing index file",
    )

    render_parser = subparsers.add_parser("render", help="print a single generated file to stdout")
    render_parser.add_argument("kind", help="One of: " + ", ".join(kind.value for kind in FileKind))
    render_parser.add_argument("name", help="Component name")
    _add_variant_arguments(render_parser)

    return parser


def _resolve_config(args: argparse.Namespace) -> GenerationConfig:
    options: dict[str, Any] = load_defaults(args.config)
    for key in ("framework", "style", "language", "with_props", "upper_case_file"):
        value = getattr(args, key)
        if value is not None:
            options[key] = value
    LOGGER.debug("resolved options %s", options)
    return GenerationConfig.from_options(**options)


def _handle_component(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    kinds = [FileKind.COMPONENT, FileKind.INDEX]
    if args.test:
        kinds.append(FileKind.TEST)
    if args.stories:
        kinds.append(FileKind.STORY)

    scaffolder = ComponentScaffolder()
    for name in args.names:
        written = scaffolder.create(name, config, args.directory, kinds=kinds, force=args.force)
        print(f"Component created at {written[0].parent}")
    return 0


def _handle_index(args: argparse.Namespace) -> int:
    scaffolder = ComponentScaffolder()
    destination = scaffolder.create_folder_index(args.directory, language=args.language, force=args.force)
    print(f"Index written to {destination}")
    return 0


def _handle_render(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    rendered = ComponentGenerator().render(args.kind, args.name, config)
    sys.stdout.write(rendered)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "component": _handle_component,
        "index": _handle_index,
        "render": _handle_render,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.error("no command provided")
        return 2

    try:
        return handler(args)
    except (GenerationError, FileExistsError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
