"""
imdbscrape._scraper
===================
Orchestration layer: validate → fetch → check status → parse.

End users call the re-exported coroutines in imdbscrape/__init__.py.
"""

from __future__ import annotations

import re

from niquests import AsyncSession

from ._http import BASE_URL, TIMEOUT, get_language, http_get
from ._log import dbg, c, C
from ._parse import parse_episodes, parse_title
from .errors import InvalidArgument, InvalidIdentifier, NotFound, ServerError, UnexpectedStatus
from .models import EpisodeRecord, TitleRecord

_TITLE_ID_RE = re.compile(r"tt[0-9]+")


# ─── Validation / URLs ────────────────────────────────────────────────────────

def check_title_id(title_id: object) -> str:
    if not isinstance(title_id, str) or not _TITLE_ID_RE.fullmatch(title_id):
        raise InvalidIdentifier(title_id)
    return title_id


def check_season(season: object) -> int:
    """Season must be a positive int, or -1 for "all seasons"."""
    if isinstance(season, bool) or not isinstance(season, int) or season == 0 or season < -1:
        raise InvalidArgument(f"invalid season number: {season!r}")
    return season


def title_url(title_id: str) -> str:
    return f"{BASE_URL}/title/{check_title_id(title_id)}/"


def episodes_url(title_id: str, season: int) -> str:
    return f"{title_url(title_id)}episodes/_ajax?season={check_season(season)}"


# ─── Title ────────────────────────────────────────────────────────────────────

async def fetch_title(
    title_id: str,
    *,
    language: str | None = None,
    timeout: float = TIMEOUT,
    session: AsyncSession | None = None,
) -> TitleRecord:
    url = title_url(title_id)
    dbg(f"\n{c('◈  Title', C.BCYAN, C.BOLD)} {c(title_id, C.BYELLOW, C.BOLD)}")

    status, body = await http_get(
        url, language=language or get_language(), timeout=timeout, session=session,
    )
    if status == 404:
        raise NotFound(url)
    if status != 200:
        raise UnexpectedStatus(status, url)

    return parse_title(body, title_id)


# ─── Episodes ─────────────────────────────────────────────────────────────────

async def fetch_episodes(
    title_id: str,
    season: int,
    *,
    language: str | None = None,
    timeout: float = TIMEOUT,
    session: AsyncSession | None = None,
) -> list[EpisodeRecord]:
    url = episodes_url(title_id, season)
    dbg(f"\n{c('◈  Episodes', C.BCYAN, C.BOLD)} {c(title_id, C.BYELLOW, C.BOLD)} "
        f"season {c(season, C.BYELLOW, C.BOLD)}")

    status, body = await http_get(
        url, language=language or get_language(), timeout=timeout, session=session,
    )
    if status == 500:
        raise ServerError(url)
    if status != 200:
        raise UnexpectedStatus(status, url)

    return parse_episodes(body)
