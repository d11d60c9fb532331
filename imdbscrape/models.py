"""
imdbscrape.models
=================
Immutable records returned by the public API.

    from imdbscrape import title, episodes
    t  = await title("tt0133093")          → TitleRecord
    t.year                                 → ExactYear | YearRange | None
    t.show                                 → Show | None (episode pages only)
    eps = await episodes("tt0944947", 1)   → list[EpisodeRecord]

Every optional field is ``None`` when the page did not carry it; list-valued
fields are ``None`` rather than empty.  ``to_dict()`` drops absent fields.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Optional, Union


# ─── Year variants ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ExactYear:
    """A single release year, e.g. a movie."""

    year: int

    def to_value(self) -> int:
        return self.year

    def __str__(self) -> str:
        return str(self.year)


@dataclass(frozen=True)
class YearRange:
    """A run of years, e.g. a series.  Either end may be unknown."""

    since: Optional[int] = None
    until: Optional[int] = None

    def to_value(self) -> dict:
        return {"since": self.since, "until": self.until}

    def __str__(self) -> str:
        since = "" if self.since is None else str(self.since)
        until = "" if self.until is None else str(self.until)
        return f"{since}–{until}"


Year = Union[ExactYear, YearRange]


# ─── Show ─────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Show:
    """The parent series of an episode page."""

    id:   str   # "tt0944947"
    name: str   # "Game of Thrones"

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


def _compact(obj) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        if isinstance(value, (ExactYear, YearRange)):
            value = value.to_value()
        elif isinstance(value, Show):
            value = value.to_dict()
        elif isinstance(value, tuple):
            value = list(value)
        out[f.name] = value
    return out


# ─── TitleRecord ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TitleRecord:
    """
    Everything extracted from one IMDb title page.

    Only `id`, `name` and `rated` are guaranteed.  `rating`/`votes` and
    `season`/`episode` are always set as pairs.
    """

    id:    str                       # "tt0133093"
    name:  str                       # "The Matrix"
    rated: str                       # "R"

    year:   Optional[Year]  = None
    rating: Optional[float] = None   # 8.7
    votes:  Optional[int]   = None   # 1234567
    cover:  Optional[str]   = None   # poster URL

    duration:     Optional[str] = None   # "136 min"
    language:     Optional[str] = None   # "English"
    aka:          Optional[str] = None
    release_date: Optional[str] = None   # "31 March 1999"
    awards:       Optional[str] = None
    type:         Optional[str] = None   # "Movie" | "TV Series" | …

    # Series / episode pages
    seasons: Optional[int]  = None
    show:    Optional[Show] = None
    season:  Optional[int]  = None
    episode: Optional[int]  = None

    synopsis:  Optional[str]             = None
    genres:    Optional[tuple[str, ...]] = None
    cast:      Optional[tuple[str, ...]] = None
    directors: Optional[tuple[str, ...]] = None
    creators:  Optional[tuple[str, ...]] = None

    def __str__(self) -> str:
        parts = [self.name]
        if self.year is not None:
            parts.append(str(self.year))
        parts.append(self.rated)
        if self.rating is not None:
            parts.append(f"★ {self.rating}/10 ({self.votes} votes)")
        return "  ·  ".join(parts)

    def to_dict(self) -> dict:
        return _compact(self)


# ─── EpisodeRecord ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class EpisodeRecord:
    """One row of a season's episode list."""

    number: int               # 1
    id:     str               # "tt1480055"
    name:   str               # "Winter Is Coming"  (entity-decoded)
    image:  str               # thumbnail URL
    title:  str               # "S1, Ep1"  (raw label under the thumbnail)
    air_date: Optional[str] = None   # "2011-04-17"

    def __str__(self) -> str:
        date = f"  ({self.air_date})" if self.air_date else ""
        return f"{self.number:>3}. {self.name}  [{self.id}]{date}"

    def to_dict(self) -> dict:
        return _compact(self)
