"""Command line entrypoint for physlist.

This is the orchestration boundary: configuration errors raised while
resolving are turned into a diagnostic on stderr and a non-zero exit
status here, and nowhere else.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from physlist.api.runtime import diagnostic_payload, summarize_setup
from physlist.config import Settings
from physlist.domain.errors import PhysicsConfigError
from physlist.domain.registry import DEFAULT_REGISTRY
from physlist.engine import RecordingEngine
from physlist.factory import create_setup_service
from physlist.schemas.physics import load_config_file


EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_INPUT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="physlist", description="Resolve physics-list configurations")
    parser.add_argument("--log-level", default=None, help="Logging level (defaults to settings)")
    commands = parser.add_subparsers(dest="command", required=True)

    resolve = commands.add_parser("resolve", help="Resolve a JSON physics configuration")
    resolve.add_argument("config", type=Path, help="Path to the JSON configuration")
    resolve.add_argument(
        "--apply",
        action="store_true",
        help="Dry-run the resolved setup on a recording engine and print the call log",
    )

    commands.add_parser("modules", help="List the recognised physics modules")

    serve = commands.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1", help="Host interface to bind")
    serve.add_argument("--port", type=int, default=8000, help="TCP port to listen on")
    serve.add_argument("--reload", action="store_true", help="Enable autoreload (dev mode)")
    return parser


def _resolve(config_path: Path, apply: bool) -> int:
    try:
        source = load_config_file(config_path)
    except FileNotFoundError:
        print(f"physlist: configuration '{config_path}' not found", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except ValidationError as exc:
        print(f"physlist: invalid configuration '{config_path}':\n{exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    engine = RecordingEngine()
    service = create_setup_service(engine)
    try:
        setup = service.build(source)
    except PhysicsConfigError as exc:
        print(f"PhysicsList: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    summary = summarize_setup(setup)
    if apply:
        result = service.executor.apply(setup.assembly, setup.cut_table, setup.plan)
        summary["diagnostics"] += [diagnostic_payload(item) for item in result.diagnostics]
        summary["transcript"] = engine.transcript()
    print(json.dumps(summary, indent=2))
    return EXIT_OK


def _serve(host: str, port: int, reload: bool) -> int:
    import uvicorn

    uvicorn.run("physlist.api.app:create_app", host=host, port=port, reload=reload, factory=True)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=(args.log_level or Settings().log_level).upper())

    if args.command == "resolve":
        return _resolve(args.config, args.apply)
    if args.command == "modules":
        for name, category in DEFAULT_REGISTRY.categories():
            print(f"{name}\t{category.value}")
        return EXIT_OK
    return _serve(args.host, args.port, args.reload)


if __name__ == "__main__":  # pragma: no cover - manual launch helper
    sys.exit(main())
