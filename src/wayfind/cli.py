from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from wayfind.app.build import App, build
from wayfind.config.models import GraphByPath, WayfindModel
from wayfind.domain.errors import WayfindError


def load_config(path: Optional[Path], graph_file: Optional[Path]) -> WayfindModel:
    data = json.loads(path.read_text(encoding="utf-8")) if path else {}
    model = WayfindModel.model_validate(data)
    if graph_file is not None:
        update = {"graph": GraphByPath(file=str(graph_file))}
        if "facilities" not in data:
            # the default facility targets only exist on the bundled station map
            update["facilities"] = {}
        model = model.model_copy(update=update)
    return model


def _shared_options(top_level: bool) -> argparse.ArgumentParser:
    # subcommand copies leave the namespace alone unless the option is given after the command
    shared = argparse.ArgumentParser(
        add_help=False, argument_default=None if top_level else argparse.SUPPRESS
    )
    shared.add_argument("--config", type=Path, help="JSON config file.")
    shared.add_argument(
        "--graph", type=Path, help="Graph JSON file (overrides the config's graph source)."
    )
    shared.add_argument("--quiet", action="store_true", help="Disable JSON query logs.")
    return shared


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wayfind", description="Indoor wayfinding routes.", parents=[_shared_options(True)]
    )
    sub = parser.add_subparsers(dest="command", required=True)
    common = [_shared_options(False)]

    route = sub.add_parser("route", parents=common, help="Compute a route between two nodes.")
    route.add_argument("source")
    route.add_argument("dest")
    route.add_argument(
        "--accessible", action="store_true", help="Only use step-free (accessible) edges."
    )

    facility = sub.add_parser(
        "facility", parents=common, help="Highlight a facility without routing."
    )
    facility.add_argument("category")

    sub.add_parser("nodes", parents=common, help="List node ids and coordinates.")
    sub.add_parser("facilities", parents=common, help="List facility categories.")
    return parser


def _run(app: App, args: argparse.Namespace) -> int:
    if args.command == "route":
        overlay = app.find_route(args.source, args.dest, args.accessible)
        return 0 if overlay.status == "route" else 1
    if args.command == "facility":
        app.highlight_facility(args.category)
        return 0
    if args.command == "nodes":
        for node in app.wayfinder.graph:
            print(f"{node.id}\t{node.x:g}\t{node.y:g}")
        return 0
    if args.command == "facilities":
        for category in app.wayfinder.facilities.categories():
            print(f"{category}\t{app.wayfinder.facilities.targets[category]}")
        return 0
    raise AssertionError(args.command)


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        model = load_config(args.config, args.graph)
        app = build(model, use_logging=not args.quiet)
        return _run(app, args)
    except (WayfindError, ValidationError, OSError, json.JSONDecodeError) as exc:
        print(f"wayfind: error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
