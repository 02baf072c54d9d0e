from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

import yaml
from dotenv import load_dotenv

from placekeeper.app import Operation, build_resource_reconciler, reconcile_resource
from placekeeper.config import ConfigurationError, configure_logging
from placekeeper.domain.resources import ResourceError, ResourceType

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from placekeeper.domain.resources import Document

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile one Roblox experience resource")
    parser.add_argument(
        "--project",
        type=str,
        help="Project directory that asset file paths are resolved against "
        "(defaults to PLACEKEEPER_PROJECT_DIR or the current directory)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for operation in Operation:
        command = subparsers.add_parser(
            operation.value, help=f"{operation.value.capitalize()} a resource"
        )
        command.add_argument(
            "--type",
            dest="resource_type",
            required=True,
            choices=[resource_type.value for resource_type in ResourceType],
            help="Resource type to operate on",
        )
        command.add_argument(
            "--inputs",
            type=Path,
            required=True,
            help="JSON or YAML file holding the resource inputs document",
        )
        if operation is not Operation.CREATE:
            command.add_argument(
                "--outputs",
                type=Path,
                required=True,
                help="JSON or YAML file holding the outputs recorded by the previous run",
            )

    return parser.parse_args(list(argv))


def _load_document(path: Path) -> Document:
    try:
        with path.open(encoding="utf-8") as handle:
            return yaml.safe_load(handle)
    except OSError as exc:
        raise ValueError(f"Cannot read document {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid document {path}: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else None)
        operation = Operation(parsed_args.command)
        inputs = _load_document(parsed_args.inputs)
        outputs = _load_document(parsed_args.outputs) if operation is not Operation.CREATE else None
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        reconciler = build_resource_reconciler(project_dir=parsed_args.project)
        result = reconcile_resource(
            reconciler,
            operation,
            parsed_args.resource_type,
            inputs,
            outputs,
        )
    except (ConfigurationError, ResourceError) as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)

    if result is not None:
        sys.stdout.write(json.dumps(result, indent=2) + "\n")


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
