from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from catalogsync.app import sync_provider
from catalogsync.config import PROVIDER_PROFILES, ConfigurationError, configure_logging
from catalogsync.domain.ports.fetching import ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

_PAYLOAD_EXCERPT_CHARS = 2_000


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Synchronise provider model catalogs")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output, including skipped ids and pending changes",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Sync one provider's catalog into the store")
    sync.add_argument("provider", choices=sorted(PROVIDER_PROFILES), help="Provider id")
    sync.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute and log every decision without touching the store",
    )
    sync.add_argument(
        "--new-only",
        action="store_true",
        help="Only create records that do not exist yet; never update existing ones",
    )
    sync.add_argument(
        "--providers-root",
        type=Path,
        default=None,
        help="Root directory holding <provider>/models (defaults to $CATALOGSYNC_PROVIDERS_ROOT)",
    )

    subparsers.add_parser("providers", help="List known providers")

    return parser.parse_args(list(argv))


def _list_providers() -> None:
    for provider_id in sorted(PROVIDER_PROFILES):
        profile = PROVIDER_PROFILES[provider_id]
        print(f"{provider_id}: {profile.display_name} ({profile.url})")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    if parsed_args.verbose:
        configure_logging(level=logging.DEBUG, force=True)

    if parsed_args.command == "providers":
        _list_providers()
        return

    try:
        report = sync_provider(
            parsed_args.provider,
            dry_run=parsed_args.dry_run,
            new_only=parsed_args.new_only,
            providers_root=parsed_args.providers_root,
        )
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(1)
    except ValidationError as exc:
        log.exception("Invalid %s catalog response", parsed_args.provider)
        log.error("When parsing: %s", repr(exc.payload)[:_PAYLOAD_EXCERPT_CHARS])
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during sync")
        sys.exit(1)

    verb = "would be " if report.dry_run else ""
    log.info(
        "Summary: %d %screated, %d %supdated, %d unchanged, %d skipped, %d orphaned",
        report.created,
        verb,
        report.updated,
        verb,
        report.unchanged,
        report.skipped,
        len(report.orphaned),
    )


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
