from __future__ import annotations

import argparse
import asyncio

from creature_ranker.settings import settings


def _configure_logging() -> None:
    import logging

    level = (settings.log_level or "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def cmd_version() -> int:
    from creature_ranker import __version__

    print(__version__)
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    _configure_logging()
    from creature_ranker.pipeline import run_once

    ranking = asyncio.run(run_once(settings))
    return 0 if ranking is not None else 1


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="creature-ranker")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version").set_defaults(func=lambda _a: cmd_version())

    run = sub.add_parser(
        "run", help="Fetch creatures and print the difficulty, swimmer and flier rankings"
    )
    run.set_defaults(func=cmd_run)

    return p


def app(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    app()
