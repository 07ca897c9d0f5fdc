from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from licensetools import __version__
from licensetools.app import check_licenses, list_dependency_licenses
from licensetools.config import ConfigurationError, configure_logging, get_audit_config
from licensetools.domain.reconciliation import ReconciliationFailure

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from licensetools.config import AuditConfig

log = logging.getLogger(__name__)


def _add_scope_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--graph",
        type=str,
        help="Dependency graph snapshot exported from the build (defaults to config)",
    )
    parser.add_argument(
        "--ignore-module",
        action="append",
        default=[],
        metavar="NAME",
        help="Module to leave out of the audit (repeatable)",
    )
    parser.add_argument(
        "--ignore-group",
        action="append",
        default=[],
        metavar="GROUP",
        help="Artifact group to leave out of the audit (repeatable)",
    )
    parser.add_argument(
        "--module",
        action="append",
        dest="modules",
        metavar="NAME",
        help="Audit only this module and the modules it depends on (repeatable)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Log warnings only")


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Audit third-party dependency licenses against a library manifest"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser(
        "check",
        help="Check whether dependency licenses are listed in the manifest",
    )
    check.add_argument(
        "--manifest",
        type=str,
        help="Library manifest to check against (defaults to config)",
    )
    _add_scope_arguments(check)

    dependencies = subparsers.add_parser(
        "dependencies",
        help="Print a manifest entry for every resolved library",
    )
    _add_scope_arguments(dependencies)

    return parser.parse_args(list(argv))


def _log_level(args: argparse.Namespace) -> int:
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.WARNING
    return logging.INFO


def _build_config(args: argparse.Namespace) -> AuditConfig:
    config = get_audit_config(
        manifest_path=getattr(args, "manifest", None),
        graph_path=args.graph,
        ignored_modules=args.ignore_module,
        ignored_groups=args.ignore_group,
    )
    config.require_files(manifest=args.command == "check")
    return config


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=_log_level(parsed_args), force=True)

    try:
        config = _build_config(parsed_args)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        if parsed_args.command == "check":
            check_licenses(config, roots=parsed_args.modules)
        elif parsed_args.command == "dependencies":
            for entry in list_dependency_licenses(config, roots=parsed_args.modules):
                print(entry)  # noqa: T201
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except ReconciliationFailure as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(1)
    except ValueError:
        log.exception("Invalid audit input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during license check")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
