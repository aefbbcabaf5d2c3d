"""Command line entry point: generate indexes and manage settings."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Sequence

from application.use_cases.generate_index import generate_index
from domain.entities import IndexSettings
from domain.errors import EmptyInputError, NoQualifyingTermsError, SettingsError
from infrastructure.config import ContainerConfig, build_default_container, build_scorer
from infrastructure.repositories.json_settings_repository import validate_settings
from ui.logging_utils import setup_logging

logger = logging.getLogger(__name__)

EXIT_EMPTY_INPUT = 2
EXIT_NO_TERMS = 3
EXIT_BAD_SETTINGS = 4


def _positive_int(value: str) -> int:
    try:
        parsed = int(value, 10)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{value}'") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{value}'")
    return parsed


def _add_threshold_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--top-n", type=_positive_int, help="Maximum number of terms in the index.")
    parser.add_argument(
        "--min-occurrences",
        type=_positive_int,
        help="Minimum total occurrences for a term to be indexed.",
    )
    parser.add_argument("--weighting", choices=("tfidf", "bm25"), help="Term weighting scheme.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termindex", description="Build a TF-IDF term index of a markdown vault.")
    parser.add_argument("--vault", help="Vault directory (default: $TERMINDEX_VAULT_DIR or .).")
    parser.add_argument("--settings", help="Settings file (default: $TERMINDEX_SETTINGS_PATH or termindex.json).")
    parser.add_argument("--log-level", help="Logging level (default: $TERMINDEX_LOG_LEVEL or INFO).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a vault or folder index.")
    generate.add_argument("--folder", help="Only index notes inside this vault folder.")
    generate.add_argument("--extractor", choices=("markdown", "plain"), default="markdown")
    _add_threshold_options(generate)

    settings = subparsers.add_parser("settings", help="Show or change stored settings.")
    settings_commands = settings.add_subparsers(dest="settings_command", required=True)
    settings_commands.add_parser("show", help="Print the stored settings.")
    set_parser = settings_commands.add_parser("set", help="Update stored settings.")
    _add_threshold_options(set_parser)
    set_parser.add_argument(
        "--exclude",
        action="append",
        metavar="FOLDER",
        help="Folder to exclude; repeat or pass a comma-separated list. Replaces the stored list.",
    )
    set_parser.add_argument("--clear-exclusions", action="store_true", help="Remove all excluded folders.")
    return parser


def _container_config(args: argparse.Namespace) -> ContainerConfig:
    config = ContainerConfig(extractor=getattr(args, "extractor", "markdown"))
    if args.vault:
        config.vault_dir = args.vault
    if args.settings:
        config.settings_path = args.settings
    return config


def _apply_overrides(settings: IndexSettings, args: argparse.Namespace) -> IndexSettings:
    changes: dict[str, object] = {}
    if args.top_n is not None:
        changes["top_n"] = args.top_n
    if args.min_occurrences is not None:
        changes["min_occurrences"] = args.min_occurrences
    if args.weighting is not None:
        changes["weighting"] = args.weighting
    if getattr(args, "clear_exclusions", False):
        changes["excluded_folders"] = []
    elif getattr(args, "exclude", None):
        folders = [part.strip() for value in args.exclude for part in value.split(",")]
        changes["excluded_folders"] = [folder for folder in folders if folder]
    return replace(settings, **changes)


def _format_settings(settings: IndexSettings) -> str:
    excluded = ", ".join(settings.excluded_folders) or "(none)"
    return "\n".join(
        [
            f"top_n: {settings.top_n}",
            f"min_occurrences: {settings.min_occurrences}",
            f"excluded_folders: {excluded}",
            f"weighting: {settings.weighting}",
        ]
    )


def _run_generate(args: argparse.Namespace) -> int:
    container = build_default_container(_container_config(args))
    settings = _apply_overrides(container.settings_repository.load(), args)
    try:
        result = generate_index(
            args.folder,
            settings,
            document_source=container.document_source,
            report_repository=container.report_repository,
            extractor=container.extractor,
            tokenizer=container.tokenizer,
            scorer=build_scorer(settings.weighting),
            renderer=container.renderer,
        )
    except EmptyInputError as exc:
        print(f"Term Index: {exc}", file=sys.stderr)
        return EXIT_EMPTY_INPUT
    except NoQualifyingTermsError as exc:
        print(
            f"Term Index: {exc}. Try lowering --min-occurrences (currently {exc.min_occurrences}).",
            file=sys.stderr,
        )
        return EXIT_NO_TERMS
    print(
        f"Term Index: {result.term_count} terms from {result.document_count} files "
        f"written to {result.output_path}"
    )
    return 0


def _run_settings(args: argparse.Namespace) -> int:
    repository = build_default_container(_container_config(args)).settings_repository
    settings = repository.load()
    if args.settings_command == "set":
        settings = validate_settings(_apply_overrides(settings, args))
        repository.save(settings)
        logger.info("Settings updated")
    print(_format_settings(settings))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    try:
        if args.command == "generate":
            return _run_generate(args)
        return _run_settings(args)
    except SettingsError as exc:
        print(f"Term Index: {exc}", file=sys.stderr)
        return EXIT_BAD_SETTINGS
    except NotADirectoryError as exc:
        print(f"Term Index: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
