from __future__ import annotations

import argparse
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape

from jira_linker.agents.publisher import Outcome
from jira_linker.app import run_check
from jira_linker.config.check_config import CheckConfig, canonical_options
from jira_linker.config.settings import Settings
from jira_linker.kit.errors import ApiError, ConfigurationError
from jira_linker.kit.memory import RecordingHost
from jira_linker.tools.bitbucket_tools import BitbucketPullRequestHost
from jira_linker.tools.config_loader import read_check_options

logger = logging.getLogger(__name__)

console = Console()

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def configure_logging(settings: Settings) -> None:
    log_path = Path(settings.LOG_PATH)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_jira_linker", False):
            if Path(existing.baseFilename).resolve() == log_path.resolve():
                return
            root.removeHandler(existing)
            existing.close()
    handler = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=5)
    handler._jira_linker = True  # type: ignore[attr-defined]
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jira-pr-check",
        description="Link Jira issues referenced as [KEY-123] in a pull request.",
    )
    parser.add_argument("--config", help="YAML/JSON file with check options")
    parser.add_argument("--key", action="append", dest="keys", help="Jira project key (repeatable)")
    parser.add_argument("--url", dest="base_url", help="Jira browse URL, e.g. https://myjira.atlassian.net/browse")
    parser.add_argument("--emoji", default=None)
    parser.add_argument("--search-title", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--search-commits", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--fail-on-warning", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--report-missing", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--project", help="Bitbucket project key")
    parser.add_argument("--repo", help="Bitbucket repository slug")
    parser.add_argument("--pr", type=int, help="Pull request id")
    parser.add_argument("--dry-run", action="store_true", help="Scan --title/--commit locally and print the result")
    parser.add_argument("--title", default="", help="Pull request title (dry run)")
    parser.add_argument("--commit", action="append", default=[], help="Commit message (dry run, repeatable)")
    return parser


def resolve_config(args: argparse.Namespace, settings: Settings) -> CheckConfig:
    """Merge options: command-line flags over the config file over the environment."""
    options: Dict[str, Any] = settings.check_options()
    if args.config:
        options.update(canonical_options(read_check_options(args.config)))
    flags = {
        "keys": args.keys,
        "base_url": args.base_url,
        "emoji": args.emoji,
        "search_title": args.search_title,
        "search_commits": args.search_commits,
        "fail_on_warning": args.fail_on_warning,
        "report_missing": args.report_missing,
    }
    options.update({k: v for k, v in flags.items() if v is not None})
    return CheckConfig.from_mapping(options)


def _print_recorded(host: RecordingHost) -> None:
    for text in host.messages:
        console.print(f"[green]message[/green] {escape(text)}", soft_wrap=True, emoji=False, highlight=False)
    for text in host.warnings:
        console.print(f"[yellow]warning[/yellow] {escape(text)}", soft_wrap=True, emoji=False, highlight=False)
    for text in host.failures:
        console.print(f"[red]failure[/red] {escape(text)}", soft_wrap=True, emoji=False, highlight=False)
    if not (host.messages or host.warnings or host.failures):
        console.print("No annotation posted.")


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = settings or Settings()
        configure_logging(settings)
        config = resolve_config(args, settings)
        if args.dry_run:
            host: Any = RecordingHost(title=args.title, commit_messages=list(args.commit))
        else:
            if not (args.project and args.repo and args.pr):
                raise ConfigurationError("--project, --repo and --pr are required unless --dry-run is set")
            host = BitbucketPullRequestHost.from_settings(settings, args.project, args.repo, args.pr)
        result = run_check(host, config)
    except ConfigurationError as exc:
        console.print(f"[red]Configuration error: {escape(str(exc))}[/red]", soft_wrap=True)
        return EXIT_CONFIG
    except ApiError as exc:
        logger.error("Check aborted: %s", exc)
        console.print(f"[red]Check aborted: {escape(str(exc))}[/red]", soft_wrap=True)
        return EXIT_FAILED

    if args.dry_run:
        _print_recorded(host)
    return EXIT_FAILED if result.outcome is Outcome.FAILURE else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
