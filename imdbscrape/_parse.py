"""
imdbscrape._parse
=================
All extraction logic.  No network access happens in this module.

Two public entry points
-----------------------
parse_title(body, title_id)   → TitleRecord
parse_episodes(body)          → list[EpisodeRecord]

Title pages are handled by a list of independent *rules*.  Each rule is a
pure function ``body -> dict | None`` returning the fields it found (or
None), so a rule that stops matching after a site change just drops its
fields instead of breaking the record.  Only `name` and `rated` are
required; their absence raises `ParseError`.
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable
from datetime import datetime
from typing import Any, Optional

from bs4 import BeautifulSoup, NavigableString, Tag

from ._log import dbg, c, C
from .errors import CountMismatch, ParseError, SanityCheckFailed
from .models import EpisodeRecord, ExactYear, Show, TitleRecord, Year, YearRange

Rule = Callable[[str], Optional[dict[str, Any]]]


def html_decode(text: str) -> str:
    """Turn HTML entities (``&amp;``, ``&#39;`` …) into literal characters."""
    return html.unescape(text)


def _leading_int(text: str) -> int | None:
    """Integer value of the leading digits in *text*, or None when there are none."""
    m = re.match(r"\s*(\d+)", text)
    return int(m.group(1)) if m else None


# ══════════════════════════════════════════════════════════════════════════════
#  Required title fields (matched against the entity-decoded body)
# ══════════════════════════════════════════════════════════════════════════════

_NAME_RE  = re.compile(r"itemprop=.name.>\s*([^<]+)")
_RATED_RE = re.compile(r"itemprop=.contentRating.\s*content=.([^\"]+)\"")


def _required(pattern: re.Pattern[str], decoded: str, field: str) -> str:
    m = pattern.search(decoded)
    if not m:
        raise ParseError(field)
    return m.group(1).strip()


# ══════════════════════════════════════════════════════════════════════════════
#  Year strategies: tried in order, first success wins
# ══════════════════════════════════════════════════════════════════════════════

_EXACT_YEAR_RE = re.compile(
    r"span[^>]*>\(<a\s*href=\"/year/(\d{4})/[^\"]*\"\s*>\d{4}</a>\)</span>\s*</h1>"
)
_YEAR_RANGE_RE = re.compile(r"span[^>]*>\(([^–]*)–([^)]*)\)</span>\s*</h1>")


def _exact_year(body: str) -> Year | None:
    m = _EXACT_YEAR_RE.search(body)
    return ExactYear(int(m.group(1))) if m else None


def _year_range(body: str) -> Year | None:
    m = _YEAR_RANGE_RE.search(body)
    if not m:
        return None
    return YearRange(since=_leading_int(m.group(1)), until=_leading_int(m.group(2)))


YEAR_STRATEGIES: tuple[Callable[[str], Year | None], ...] = (_exact_year, _year_range)


def rule_year(body: str) -> dict | None:
    for strategy in YEAR_STRATEGIES:
        year = strategy(body)
        if year is not None:
            return {"year": year}
    return None


# ══════════════════════════════════════════════════════════════════════════════
#  Optional scalar rules (matched against the raw body)
# ══════════════════════════════════════════════════════════════════════════════

def _single(field: str, pattern: str, default: str | None = None) -> Rule:
    """Build a rule that stores the stripped first group of *pattern* in *field*."""
    regex = re.compile(pattern)

    def rule(body: str) -> dict | None:
        m = regex.search(body)
        if not m:
            return None
        value = m.group(1).strip()
        if not value and default is not None:
            value = default
        return {field: value}

    rule.__name__ = f"rule_{field}"
    return rule


_RATING_RE = re.compile(r"title=.Users rated this ([^/]+).10 \(([^v]+)")


def rule_rating(body: str) -> dict | None:
    m = _RATING_RE.search(body)
    if not m:
        return None
    digits = re.sub(r"[^\d]+", "", m.group(2))
    try:
        rating = float(m.group(1))
    except ValueError:
        return None
    if not digits or not 0 <= rating <= 10:
        return None
    return {"rating": rating, "votes": int(digits)}


_SEASONS_RE = re.compile(r"href=./title/tt\d+/episodes\?season=(\d+)")


def rule_seasons(body: str) -> dict | None:
    # The first link is the most recent (highest) season.
    m = _SEASONS_RE.search(body)
    if not m or int(m.group(1)) == 0:
        return None
    return {"seasons": int(m.group(1))}


_SHOW_RE = re.compile(
    r"<h2\s+class=.tv_header.>\s*<a\s+href=./title/(tt[^/]+)/.\s*>\s*([^<]+)</a>"
)


def rule_show(body: str) -> dict | None:
    m = _SHOW_RE.search(body)
    if not m:
        return None
    return {"show": Show(id=m.group(1), name=html_decode(m.group(2)).strip())}


_SEASON_EPISODE_RE = re.compile(
    r"<span\sclass=.nobr.>Season\s(\d+), Episode\s(\d+)\s*</span>\s*</h2"
)


def rule_season_episode(body: str) -> dict | None:
    m = _SEASON_EPISODE_RE.search(body)
    if not m:
        return None
    return {"season": int(m.group(1)), "episode": int(m.group(2))}


TITLE_RULES: tuple[Rule, ...] = (
    rule_year,
    rule_rating,
    _single("cover",        r"src=.(h[^\"]+).\s*[^<]+itemprop=.image"),
    _single("duration",     r"itemprop=.duration[^>]*>\s*([^<]+)\s*<"),
    _single("language",     r"Language:</h4>\s*<a[^>]*>([^<]+)\s*</a>"),
    _single("aka",          r"Also Known As:</h4>\s*([^<]+)\s*<"),
    _single("type",         r"<div class=\"infobar\">\s*([^\n<]+)", default="Movie"),
    _single("release_date", r"Release Date:</h4>\s*([^<(]+)[^<]*\s<"),
    _single("awards",       r"itemprop=.awards.>\s*([^<]+)<"),
    rule_seasons,
    rule_show,
    rule_season_episode,
)


# ══════════════════════════════════════════════════════════════════════════════
#  Tree rules (CSS selectors over a BeautifulSoup document)
# ══════════════════════════════════════════════════════════════════════════════

LIST_SELECTORS: dict[str, str] = {
    "genres":    '.infobar a[href^="/genre/"] span',
    "cast":      "[itemprop=actor] [itemprop=name]",
    "directors": "[itemprop=director] [itemprop=name]",
    "creators":  "[itemprop=creator] [itemprop=name]",
}


def _first_text(node: Tag) -> str:
    """Text of the node's first child.  bs4 has already decoded entities."""
    if not node.contents:
        return ""
    first = node.contents[0]
    return str(first) if isinstance(first, NavigableString) else first.get_text()


def parse_tree_fields(soup: BeautifulSoup) -> dict[str, Any]:
    found: dict[str, Any] = {}

    desc = soup.select_one('p[itemprop="description"]')
    if desc is not None:
        synopsis = _first_text(desc).replace("\n", "").strip()
        if synopsis:
            found["synopsis"] = synopsis

    for field, selector in LIST_SELECTORS.items():
        values = tuple(_first_text(node) for node in soup.select(selector))
        if values:
            found[field] = values

    return found


# ══════════════════════════════════════════════════════════════════════════════
#  Title page
# ══════════════════════════════════════════════════════════════════════════════

def parse_title(body: str, title_id: str) -> TitleRecord:
    """
    Build a `TitleRecord` from a title page body.

    Raises `ParseError` when `name` or `rated` is missing; every other
    field is best-effort.
    """
    decoded = html_decode(body)
    fields: dict[str, Any] = {
        "id":    title_id,
        "name":  _required(_NAME_RE, decoded, "name"),
        "rated": _required(_RATED_RE, decoded, "rated"),
    }

    for rule in TITLE_RULES:
        found = rule(body)
        if found:
            fields.update(found)

    fields.update(parse_tree_fields(BeautifulSoup(body, "html.parser")))

    dbg(f"     {c('✓', C.BGREEN)}  {title_id}: {len(fields)} field(s) extracted")
    return TitleRecord(**fields)


# ══════════════════════════════════════════════════════════════════════════════
#  Air dates
# ══════════════════════════════════════════════════════════════════════════════

# %b / %B follow LC_TIME: English month names under the default locale.
_AIR_DATE_FORMATS = (
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%Y-%m-%d",
    "%b %Y",
    "%B %Y",
    "%Y",
)


def normalize_air_date(text: str) -> str | None:
    """
    ``"January 5, 2001"`` / ``"5 Jan. 2001"`` → ``"2001-01-05"``.

    Missing day or month default to 1.  Returns None if no format fits.
    """
    cleaned = re.sub(r"\s+", " ", text.replace(".", " ")).strip()
    cleaned = re.sub(r"\bSept\b", "Sep", cleaned)
    cleaned = cleaned.replace(" ,", ",")
    for fmt in _AIR_DATE_FORMATS:
        try:
            dt = datetime.strptime(cleaned, fmt)
        except ValueError:
            continue
        return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
    return None


# ══════════════════════════════════════════════════════════════════════════════
#  Episode list page
# ══════════════════════════════════════════════════════════════════════════════

_EPISODE_COUNT_RE = re.compile(r"numberofEpisodes.\s+content=.(\d+)")

_EPISODE_RE = re.compile(
    r"src=\"([^\"]+)\">\s*<div>([^<]+)</div>\s*</div>\s*</a>\s*</div>\s*"
    r"<div[^>]*>\s*<meta\sitemprop=.episodeNumber.\scontent=.(\d+)./>\s*"
    r"<div\sclass=.airdate.>\s*([^<]+)\s*</div>\s*"
    r"<strong><a\s(?:onclick=.[^;]+..\s*)?href=./title/(tt\d+)/[^>]+>([^<]+)"
)


def expected_episode_count(body: str) -> int:
    m = _EPISODE_COUNT_RE.search(body)
    if not m:
        raise SanityCheckFailed()
    return int(m.group(1))


def _episode_from_match(m: re.Match[str]) -> EpisodeRecord:
    image, label, number, air_text, ep_id, name = m.groups()

    air_date = None
    if "Unknown" not in air_text:
        air_date = normalize_air_date(air_text)
        if air_date is None:
            dbg(c(f"  ⚠  unparseable air date {air_text.strip()!r} for {ep_id}", C.YELLOW))

    return EpisodeRecord(
        number   = int(number),
        id       = ep_id,
        name     = html_decode(name).strip(),
        image    = image,
        title    = label,
        air_date = air_date,
    )


def parse_episodes(body: str) -> list[EpisodeRecord]:
    """
    Extract every episode block in document order.

    Raises `SanityCheckFailed` when the page has no declared episode count
    and `CountMismatch` when the number of parsed blocks differs from it.
    """
    expected = expected_episode_count(body)
    episodes = [_episode_from_match(m) for m in _EPISODE_RE.finditer(body)]

    if len(episodes) != expected:
        raise CountMismatch(expected, len(episodes))

    dbg(f"     {c('✓', C.BGREEN)}  {c(len(episodes), C.BWHITE, C.BOLD)} episode(s) parsed.")
    return episodes
