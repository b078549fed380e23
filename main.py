"""Command line access to the TheTVDB API."""

import sys
import json
import asyncio
import argparse
import logging

import httpx
from pydantic import ValidationError

from tvdbclient import __description__, __version__
from tvdbclient.client import TvdbClient
from tvdbclient.config_loader import load_config
from tvdbclient.exceptions import TvdbError
from tvdbclient.filters import ImagesQuery, KeyType
from tvdbclient.logging_setup import setup_logging

logger = logging.getLogger("tvdbclient")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tvdb", description=__description__)
    parser.add_argument('--config', help="Path to tvdb.yaml")
    parser.add_argument('--log-level', help="Override the configured log level")
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    series = sub.add_parser("series", help="Show a series")
    series.add_argument("series_id", type=int)

    episodes = sub.add_parser("episodes", help="List episodes of a series")
    episodes.add_argument("series_id", type=int)
    episodes.add_argument("--page", type=int, default=1)

    search = sub.add_parser("search", help="Search series by name")
    search.add_argument("name")

    images = sub.add_parser("images", help="List images of a series")
    images.add_argument("series_id", type=int)
    images.add_argument("--key-type", choices=[k.value for k in KeyType], default=KeyType.POSTER.value)

    updates = sub.add_parser("updates", help="Series updated since a timestamp")
    updates.add_argument("--since", type=int, required=True, help="Epoch seconds")

    return parser


async def run(opts, config) -> object:
    """Authenticate, run the selected command and return its payload."""
    async with TvdbClient.from_config(config) as tvdb:
        await tvdb.authentication.authenticate(config.api_key, config.username, config.user_key)

        if opts.command == "series":
            envelope = await tvdb.series.get(opts.series_id)
        elif opts.command == "episodes":
            envelope = await tvdb.series.get_episodes(opts.series_id, opts.page)
        elif opts.command == "search":
            envelope = await tvdb.search.search_series_by_name(opts.name)
        elif opts.command == "images":
            query = ImagesQuery(key_type=KeyType(opts.key_type))
            envelope = await tvdb.series.get_images_query(opts.series_id, query)
        else:
            envelope = await tvdb.updates.get(opts.since)

    return envelope.model_dump(mode="json", by_alias=True, exclude_none=True)["data"]


def main(argv=None) -> int:
    opts = build_parser().parse_args(argv)

    try:
        config = load_config(opts.config)
    except TvdbError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(level=opts.log_level or config.log_level, path=config.log_path)

    try:
        data = asyncio.run(run(opts, config))
    except (TvdbError, httpx.HTTPError, ValidationError) as e:
        logger.error(f"{opts.command} failed: {e}")
        return 1

    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
