"""CLI entrypoints for elpparser commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigError, ParserConfig, load_config
from .errors import ElpError
from .logging import configure_logging
from .parser import ElpParser

_RECORD_LABELS = (
    ("version", "Version"),
    ("title", "Title"),
    ("description", "Description"),
    ("author", "Author"),
    ("license", "License"),
    ("language", "Language"),
    ("learningResourceType", "Learning resource type"),
)


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_package_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("package", help="Path to the .elp package.")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="elpparser",
        description="Inspect eXeLearning .elp packages.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a .elpparser.yml file or the directory holding it (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also append log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    info_parser = subparsers.add_parser("info", help="Print the package metadata record.")
    _add_verbose_option(info_parser, suppress_default=True)
    _add_package_argument(info_parser)

    strings_parser = subparsers.add_parser("strings", help="Print every text string, one per line.")
    _add_verbose_option(strings_parser, suppress_default=True)
    _add_package_argument(strings_parser)

    export_parser = subparsers.add_parser("export", help="Export the metadata record as JSON.")
    _add_verbose_option(export_parser, suppress_default=True)
    _add_package_argument(export_parser)
    export_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the JSON to this file instead of standard output.",
    )

    metadata_parser = subparsers.add_parser(
        "metadata",
        help="Print the schema metadata report and page tree as JSON.",
    )
    _add_verbose_option(metadata_parser, suppress_default=True)
    _add_package_argument(metadata_parser)

    extract_parser = subparsers.add_parser("extract", help="Extract the package contents.")
    _add_verbose_option(extract_parser, suppress_default=True)
    _add_package_argument(extract_parser)
    extract_parser.add_argument("destination", help="Directory to extract into (created if missing).")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP parsing service.")
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind (default: 127.0.0.1).")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on (default: 8000).")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for elpparser commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=Path(args.log_file) if args.log_file else None,
    )

    try:
        config = _load_config(args.config)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port, config=config)
        return

    try:
        package = ElpParser.from_file(args.package, config)
        if args.command == "info":
            record = package.to_dict()
            for key, label in _RECORD_LABELS:
                print(f"{label}: {record[key]}")
            print(f"Strings: {len(record['strings'])}")
        elif args.command == "strings":
            for value in package.strings:
                print(value)
        elif args.command == "export":
            payload = package.export_json(args.output)
            if args.output:
                print(f"JSON written to {_relativize(Path(args.output))}")
            else:
                print(payload)
        elif args.command == "metadata":
            report = package.get_metadata_report()
            print(json.dumps(report.to_dict(), indent=config.json_indent, ensure_ascii=False))
        elif args.command == "extract":
            target = package.extract(args.destination)
            print(f"Package extracted to {_relativize(target)}")
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except ElpError as exc:
        parser.exit(1, f"elpparser {args.command} failed: {exc}\nRun with --verbose for more details.\n")


def _load_config(value: str | None) -> ParserConfig:
    return load_config(Path(value) if value else Path.cwd())


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
