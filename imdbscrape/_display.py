"""
imdbscrape._display
===================
Terminal output helpers.

`print_title(record)`      header box plus the remaining fields of a TitleRecord.
`print_episodes(records)`  one line per EpisodeRecord.

These are purely cosmetic; no logic lives here.
"""

from __future__ import annotations

import re

from .models import EpisodeRecord, TitleRecord
from ._log import c, C

W = 72


# ─── Helpers ──────────────────────────────────────────────────────────────────

def _stars(rating: float, out_of: int = 10) -> str:
    """Convert 7.6 → coloured star bar."""
    filled = round(rating)
    color  = C.BGREEN if rating >= 8 else (C.BYELLOW if rating >= 6 else C.RED)
    return c("★" * filled, color) + c("☆" * (out_of - filled), C.DIM)


def _box_row(content: str, color=C.BCYAN) -> None:
    """Print a single ║ … ║ row, padding content to the box width."""
    raw_len = len(re.sub(r"\033\[[^m]*m", "", content))
    pad = W - 2 - raw_len
    print(c("║", color) + content + " " * max(pad, 0) + c("║", color))


def _field(label: str, value) -> None:
    print(f"  {c(f'{label:<12}', C.DIM)} {value}")


# ─── Public helpers ───────────────────────────────────────────────────────────

def print_title(record: TitleRecord) -> None:
    """Pretty-print a TitleRecord."""
    print()
    print(c("╔" + "═" * (W - 2) + "╗", C.BCYAN, C.BOLD))
    _box_row(c(f"  {record.name}  ·  {record.id}", C.BWHITE, C.BOLD))

    head = [str(v) for v in (record.type, record.year, record.rated, record.duration) if v]
    _box_row(c("  " + "  ·  ".join(head), C.DIM))

    if record.rating is not None:
        _box_row(
            "  " + _stars(record.rating) + "  " +
            c(f"{record.rating}/10", C.BYELLOW, C.BOLD) +
            c(f"  ({record.votes:,} votes)", C.DIM)
        )
    print(c("╚" + "═" * (W - 2) + "╝", C.BCYAN, C.BOLD))

    if record.show:
        _field("Show", f"{record.show.name} [{record.show.id}]")
    if record.season is not None:
        _field("Episode", f"Season {record.season}, Episode {record.episode}")
    if record.seasons is not None:
        _field("Seasons", record.seasons)
    for label, value in (
        ("Released", record.release_date),
        ("Language", record.language),
        ("Also known", record.aka),
        ("Awards", record.awards),
        ("Cover", record.cover),
    ):
        if value:
            _field(label, value)
    for label, values in (
        ("Genres", record.genres),
        ("Directors", record.directors),
        ("Creators", record.creators),
        ("Cast", record.cast),
    ):
        if values:
            _field(label, ", ".join(values))
    if record.synopsis:
        print()
        print(f"  {c(record.synopsis, C.DIM)}")
    print()


def print_episodes(records: list[EpisodeRecord]) -> None:
    """Print a compact season listing."""
    print()
    for ep in records:
        date = c(ep.air_date or "unknown", C.DIM)
        print(
            c("  │ ", C.BCYAN) +
            c(f"{ep.number:>3}", C.BCYAN, C.BOLD) + "  " +
            c(ep.name, C.BWHITE, C.BOLD) + "  " +
            c(ep.id, C.DIM) + "  " + date
        )
    print(c(f"\n  {len(records)} episode(s)", C.BWHITE, C.BOLD))
    print()
