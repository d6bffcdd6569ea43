"""Command-line interface for Kentucky geo detection."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from kygeo.detection import (
    Gazetteer,
    GazetteerError,
    KentuckyGeoResolver,
    default_gazetteer,
    load_gazetteer,
)
from kygeo.schemas import ArticleText, GeoDetectionPayload
from kygeo.settings import get_log_level

log = logging.getLogger("kygeo.cli")


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Detect Kentucky counties and cities mentioned in news articles"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    detect = subparsers.add_parser(
        "detect", help="Run geo detection on a JSON article or inline text"
    )
    source = detect.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "article",
        nargs="?",
        help="Path to a JSON article with title/body fields ('-' reads stdin)",
    )
    source.add_argument("--text", help="Article text to analyse instead of a file")
    detect.add_argument(
        "--output",
        type=Path,
        help="File to write the JSON result to (default: stdout)",
    )
    detect.add_argument(
        "--pretty", action="store_true", help="Indent the JSON output"
    )

    gazetteer = subparsers.add_parser(
        "gazetteer", help="Validate the gazetteer and print a summary"
    )

    for sub in (detect, gazetteer):
        sub.add_argument(
            "--gazetteer",
            dest="gazetteer_path",
            type=Path,
            help="JSON gazetteer to use instead of the configured one",
        )
        sub.add_argument(
            "--log-level",
            default=None,
            help="Log level (DEBUG, INFO, WARNING, ERROR). Default: KYGEO_LOG_LEVEL or INFO",
        )

    return parser.parse_args(argv)


def _configure_logging(level_name: str | None, console: Console) -> None:
    level_name = level_name or get_log_level()
    handler = RichHandler(console=console, markup=False, rich_tracebacks=True)
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def _read_article(path: str) -> Mapping[str, Any]:
    if path == "-":
        try:
            payload = json.load(sys.stdin)
        except json.JSONDecodeError as exc:
            raise ValueError("Invalid JSON on stdin") from exc
    else:
        article_path = Path(path)
        if not article_path.exists():
            raise FileNotFoundError(f"Article file not found: {article_path}")
        with article_path.open("r", encoding="utf-8") as stream:
            try:
                payload = json.load(stream)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid JSON in {article_path}") from exc
    if not isinstance(payload, Mapping):
        raise ValueError("The article must be a JSON object")
    return payload


def _load_gazetteer(path: Path | None) -> Gazetteer:
    if path is not None:
        return load_gazetteer(path)
    return default_gazetteer()


def _run_detect(args: argparse.Namespace) -> int:
    if args.text is not None:
        article = ArticleText(body=args.text)
    else:
        try:
            article = ArticleText.model_validate(_read_article(args.article))
        except ValidationError as exc:
            raise ValueError(f"Article fields are invalid: {exc}") from exc

    resolver = KentuckyGeoResolver(_load_gazetteer(args.gazetteer_path))
    result = resolver.resolve(article.title, article.body)
    log.info(
        "Detected %d counties, city=%s, kentucky_context=%s",
        len(result.counties),
        result.city,
        result.kentucky_context,
    )

    payload = GeoDetectionPayload.from_result(result).model_dump()
    serialized = json.dumps(payload, ensure_ascii=False, indent=2 if args.pretty else None)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(serialized + "\n", encoding="utf-8")
    else:
        sys.stdout.write(serialized)
        sys.stdout.write("\n")
    return 0


def _run_gazetteer(args: argparse.Namespace, console: Console) -> int:
    gazetteer = _load_gazetteer(args.gazetteer_path)
    cities = list(gazetteer.cities.values())

    table = Table(title="Kentucky gazetteer")
    table.add_column("Table")
    table.add_column("Entries", justify="right")
    table.add_row("Counties", str(len(gazetteer.counties)))
    table.add_row("Ambiguous counties", str(len(gazetteer.ambiguous_counties)))
    table.add_row("Cities", str(len(cities)))
    table.add_row("Multi-county cities", str(sum(1 for city in cities if city.is_multi_county)))
    table.add_row("Noise cities", str(sum(1 for city in cities if city.noise)))
    table.add_row("Out-of-state names", str(len(gazetteer.out_of_state_names)))
    console.print(table)
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    load_dotenv()
    args = _parse_args(argv)
    console = Console(stderr=True)
    _configure_logging(args.log_level, console)

    try:
        if args.command == "detect":
            status = _run_detect(args)
        elif args.command == "gazetteer":
            status = _run_gazetteer(args, Console())
        else:
            status = 1
    except GazetteerError as exc:
        log.error("Gazetteer rejected: %s", exc)
        status = 1
    except (OSError, ValueError) as exc:
        log.error("%s", exc)
        status = 1
    raise SystemExit(status)


__all__ = ["main"]


if __name__ == "__main__":
    main()
