#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from pipocaflix_backend.config import CatalogSettings
from pipocaflix_backend.ingestion.catalog_service import CatalogService

KINDS = ("all", "movies", "series", "episodes")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dump_catalog",
        description="Fetch the published catalog sheets through the relay and print them as JSON.",
    )
    parser.add_argument("--kind", choices=KINDS, default="all", help="Which catalog to print (default: all).")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2).")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    return parser.parse_args(argv)


async def _collect(service: CatalogService, kind: str) -> Any:
    if kind == "movies":
        return [movie.to_dict() for movie in await service.list_movies()]
    if kind == "series":
        return [series.to_dict() for series in await service.list_series()]
    if kind == "episodes":
        return [episode.to_dict() for episode in await service.list_episodes()]

    snapshot = await service.list_all()
    return {
        "movies": [movie.to_dict() for movie in snapshot.movies],
        "series": [series.to_dict() for series in snapshot.series],
    }


async def _run(args: argparse.Namespace, service: CatalogService | None = None) -> Any:
    if service is not None:
        return await _collect(service, args.kind)
    async with CatalogService(CatalogSettings.from_env()) as owned:
        return await _collect(owned, args.kind)


def main(argv: list[str] | None = None, *, service: CatalogService | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    payload = asyncio.run(_run(args, service))
    print(json.dumps(payload, ensure_ascii=False, indent=args.indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
