"""Command-line entrypoint: type queries, print the resulting suggestions."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging

import httpx

from places_autocomplete.config import get_settings
from places_autocomplete.engine import PlacesAutocomplete
from places_autocomplete.logging import configure_logging, logger
from places_autocomplete.services.places_http import HttpPlacesLibrary


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="places_autocomplete")
    parser.add_argument("queries", nargs="+", help="Queries typed in order, e.g. 'par' 'pari' 'paris'.")
    parser.add_argument("--verbose", action="store_true", help="Emit debug logs.")
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    settings = get_settings()

    async with httpx.AsyncClient() as http_client:
        places = HttpPlacesLibrary(http_client, settings.places_api)
        with PlacesAutocomplete(settings, places=places) as engine:
            if not engine.ready:
                logger.error("engine_not_ready")
                return
            # Simulate keystrokes typed faster than the debounce window.
            for query in args.queries:
                engine.set_value(query)
            await engine.wait_idle()

            suggestions = engine.suggestions
            logger.info(
                "suggestions_received",
                query=engine.value,
                status=suggestions.status,
                count=len(suggestions.data),
            )
            print(json.dumps(suggestions.model_dump(), ensure_ascii=False, indent=2, default=str))


if __name__ == "__main__":
    asyncio.run(main())
