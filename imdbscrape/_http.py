"""
imdbscrape._http
================
The fetch layer: one async GET through niquests.

Responsibilities
----------------
• Shared browser-like headers plus the configurable Accept-Language
• Fixed per-request timeout (no retries, no backoff)
• Turning niquests transport exceptions into `TransportError`

Status codes are *not* interpreted here; the caller decides what a 404
or a 500 means for its page.
"""

from __future__ import annotations

import niquests
from niquests import AsyncSession

from ._log import dbg, c, C
from .errors import TransportError

BASE_URL = "https://www.imdb.com"
TIMEOUT  = 10          # seconds
DEFAULT_LANGUAGE = "en-US"


# ─── Shared headers ───────────────────────────────────────────────────────────

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}


# ─── Process-wide language default ────────────────────────────────────────────
# Set once at start-up.  Per-call `language=` arguments take precedence.

_LANGUAGE: str = DEFAULT_LANGUAGE


def set_language(language: str) -> None:
    """Change the default ``Accept-Language`` value sent with every request."""
    global _LANGUAGE
    if not language:
        raise ValueError("language must be a non-empty string")
    _LANGUAGE = language


def get_language() -> str:
    return _LANGUAGE


# ─── Session factory ──────────────────────────────────────────────────────────

def make_session() -> AsyncSession:
    """
    Return an AsyncSession carrying the shared headers.

    Pass it as ``session=`` to several concurrent calls to reuse one
    connection pool; the caller is then responsible for closing it.
    """
    session = AsyncSession()
    session.headers.update(HEADERS)
    return session


# ─── Fetch ────────────────────────────────────────────────────────────────────

async def http_get(
    url: str,
    *,
    language: str,
    timeout: float = TIMEOUT,
    session: AsyncSession | None = None,
) -> tuple[int, str]:
    """
    GET *url* once and return ``(status_code, body)``.

    Raises `TransportError` (chained to the niquests exception) when no
    response arrives, including on timeout.
    """
    if session is None:
        async with make_session() as own:
            return await _get(own, url, language, timeout)
    return await _get(session, url, language, timeout)


async def _get(session: AsyncSession, url: str, language: str, timeout: float) -> tuple[int, str]:
    dbg(c(f"  → GET {url}  [{language}]", C.DIM))
    try:
        resp = await session.get(
            url,
            headers={"Accept-Language": language},
            timeout=timeout,
        )
    except niquests.exceptions.RequestException as exc:
        dbg(c(f"  ✗  {url}: {exc}", C.RED))
        raise TransportError(f"request to {url} failed: {exc}") from exc

    dbg(c(f"  ← {resp.status_code} {url}", C.DIM))
    return resp.status_code, resp.text or ""
