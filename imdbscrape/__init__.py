"""
imdbscrape
==========
Public API for the imdbscrape package.

Quick start
-----------
    import asyncio
    from imdbscrape import title, episodes

    # ── Title page ────────────────────────────────────────────────────────────
    t = asyncio.run(title("tt0133093"))
    print(t)                     # The Matrix  ·  1999  ·  R  ·  ★ 8.7/10 (…)
    t.genres                     # ("Action", "Sci-Fi")
    t.to_dict()                  # plain dict, absent fields dropped

    # ── One season's episode list ─────────────────────────────────────────────
    eps = asyncio.run(episodes("tt0944947", 1))
    for ep in eps:
        print(ep.number, ep.name, ep.air_date)

    # ── Several lookups sharing one connection pool ───────────────────────────
    async def main():
        async with make_session() as s:
            return await asyncio.gather(
                title("tt0944947", session=s),
                episodes("tt0944947", 1, session=s),
            )

Available symbols
-----------------
Coroutines
    title(title_id, ...)           → TitleRecord
    episodes(title_id, season, …)  → list[EpisodeRecord]

Configuration
    set_language("de-DE")    default Accept-Language (initially "en-US")
    set_debug(True)          verbose request / parse output on stderr

Errors
    IMDbError and its subclasses, see imdbscrape.errors
"""

from __future__ import annotations

from importlib.metadata import version as _pkg_version, PackageNotFoundError as _PNF

from niquests import AsyncSession

try:
    __version__ = _pkg_version("imdbscrape")
except _PNF:
    __version__ = "0.0.0.dev"

# ── Re-export public dataclasses and errors ───────────────────────────────────
from .models import TitleRecord, EpisodeRecord, Show, ExactYear, YearRange
from .errors import (
    IMDbError,
    InvalidArgument,
    InvalidIdentifier,
    TransportError,
    NotFound,
    ServerError,
    UnexpectedStatus,
    SanityCheckFailed,
    CountMismatch,
    ParseError,
)

# ── Internal engine ───────────────────────────────────────────────────────────
from ._http import TIMEOUT, make_session, set_language, get_language
from ._scraper import fetch_title, fetch_episodes, title_url
from ._log import set_debug

__all__ = [
    # Public coroutines
    "title",
    "episodes",
    # Helpers / configuration
    "title_url",
    "make_session",
    "set_language",
    "get_language",
    "set_debug",
    # Dataclasses
    "TitleRecord",
    "EpisodeRecord",
    "Show",
    "ExactYear",
    "YearRange",
    # Errors
    "IMDbError",
    "InvalidArgument",
    "InvalidIdentifier",
    "TransportError",
    "NotFound",
    "ServerError",
    "UnexpectedStatus",
    "SanityCheckFailed",
    "CountMismatch",
    "ParseError",
]


# ─────────────────────────────────────────────────────────────────────────────
#  title()
# ─────────────────────────────────────────────────────────────────────────────

async def title(
    title_id: str,
    *,
    language: str | None = None,
    timeout: float = TIMEOUT,
    session: AsyncSession | None = None,
) -> TitleRecord:
    """
    Fetch one IMDb title page and return a :class:`TitleRecord`.

    Parameters
    ----------
    title_id:
        IMDb title ID, the ``tt…`` part of any IMDb URL.
    language:
        ``Accept-Language`` for this call.  Defaults to the value set with
        :func:`set_language` (``"en-US"`` unless changed).
    timeout:
        Seconds before the request fails with :class:`TransportError`.
    session:
        Optional niquests ``AsyncSession`` to reuse; it is left open.

    Raises
    ------
    InvalidIdentifier
        *title_id* is not ``tt`` followed by digits.  No request is made.
    TransportError, NotFound, UnexpectedStatus
        The page could not be fetched.
    ParseError
        The page has no title name or no content rating.

    Examples
    --------
        t = await title("tt0133093")
        t.name        # "The Matrix"
        t.year        # ExactYear(year=1999)
        t.cast[:2]    # ("Keanu Reeves", "Laurence Fishburne")
    """
    return await fetch_title(title_id, language=language, timeout=timeout, session=session)


# ─────────────────────────────────────────────────────────────────────────────
#  episodes()
# ─────────────────────────────────────────────────────────────────────────────

async def episodes(
    title_id: str,
    season: int,
    *,
    language: str | None = None,
    timeout: float = TIMEOUT,
    session: AsyncSession | None = None,
) -> list[EpisodeRecord]:
    """
    Fetch the episode list of one season, in page order.

    *season* is 1-based; ``-1`` asks IMDb for every season at once.

    The page declares how many episodes it holds; if the number of
    parsed episodes differs, :class:`CountMismatch` is raised and nothing
    is returned.

    Raises
    ------
    InvalidIdentifier, InvalidArgument
        Bad *title_id*, or *season* is 0 or below -1.  No request is made.
    TransportError, ServerError, UnexpectedStatus
        The page could not be fetched.  IMDb answers 500 for unknown ids.
    SanityCheckFailed, CountMismatch
        The page does not look like an episode list, or is incomplete.

    Examples
    --------
        eps = await episodes("tt0944947", 1)
        eps[0].name       # "Winter Is Coming"
        eps[0].air_date   # "2011-04-17"
    """
    return await fetch_episodes(
        title_id, season, language=language, timeout=timeout, session=session,
    )
