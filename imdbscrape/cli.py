"""
imdbscrape.cli
==============
Command-line interface.  Installed as the ``imdbscrape`` command.

Usage
-----
    imdbscrape tt0133093                   # title page
    imdbscrape tt0944947 --season 1        # season 1 episode list
    imdbscrape tt0944947 -s -1 --json      # every season, as JSON
    imdbscrape tt0133093 --language de-DE
    imdbscrape tt0133093 --debug
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from . import title, episodes, set_debug, set_language
from ._display import print_episodes, print_title
from ._log import c, C
from .errors import IMDbError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imdbscrape",
        description=(
            f"{c('imdbscrape', C.BWHITE, C.BOLD)}\n"
            f"{c('Fetch title metadata or a season episode list from IMDb.', C.DIM)}\n\n"
            f"{c('Examples:', C.BYELLOW)}\n"
            f"  imdbscrape tt0133093                {c('# The Matrix', C.DIM)}\n"
            f"  imdbscrape tt0944947 -s 1           {c('# Game of Thrones, season 1', C.DIM)}\n"
            f"  imdbscrape tt0944947 -s -1 --json   {c('# every season, JSON output', C.DIM)}"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "title_id",
        metavar="TITLE_ID",
        help="The IMDb title ID, the 'tt…' code from any IMDb URL.",
    )
    parser.add_argument(
        "-s", "--season",
        type=int,
        default=None,
        metavar="N",
        help=(
            "List the episodes of season N instead of showing the title page.  "
            "Use -1 for all seasons."
        ),
    )
    parser.add_argument(
        "-l", "--language",
        default=None,
        metavar="LANG",
        help="Accept-Language header sent to IMDb.  Default: en-US.",
    )
    parser.add_argument(
        "-j", "--json",
        action="store_true",
        dest="as_json",
        help="Print the result as JSON instead of the formatted view.",
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        default=False,
        help="Print requests, status codes and parse results to stderr.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    if args.debug:
        set_debug(True)
    if args.language:
        set_language(args.language)

    try:
        if args.season is None:
            record = asyncio.run(title(args.title_id))
            if args.as_json:
                print(json.dumps(record.to_dict(), ensure_ascii=False, indent=2))
            else:
                print_title(record)
        else:
            records = asyncio.run(episodes(args.title_id, args.season))
            if args.as_json:
                print(json.dumps([r.to_dict() for r in records], ensure_ascii=False, indent=2))
            else:
                print_episodes(records)
    except IMDbError as exc:
        print(f"{c('✗', C.BRED, C.BOLD)}  {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
