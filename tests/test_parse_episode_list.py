"""
tests/test_parse_episode_list.py
================================
Unit tests for parse_episodes() and normalize_air_date().
Uses HTML fragments shaped like the IMDb episodes/_ajax response. No network.
"""

import pytest

from imdbscrape._parse import parse_episodes, normalize_air_date, expected_episode_count
from imdbscrape.errors import CountMismatch, SanityCheckFailed


# ─── Minimal episode block HTML (mirrors the real list_item structure) ────────

def make_block_html(
    number=1,
    episode_tt="tt1480055",
    name="Winter Is Coming",
    image="https://m.media-amazon.com/images/M/S1E1.jpg",
    label="S1, Ep1",
    air_date="17 Apr. 2011",
    onclick=False,
) -> str:
    click = 'onclick="(new Image()).src=\'/rg/x/y\';" ' if onclick else ""
    return f"""
<div class="list_item odd">
  <div class="image">
    <a href="/title/{episode_tt}/?ref_=ttep_ep{number}" title="{name}" itemprop="url"> <div data-const="{episode_tt}" class="hover-over-image zero-z-index">
<img width="224" height="126" class="zero-z-index" alt="{name}" src="{image}">
<div>{label}</div>
</div>
</a>  </div>
  <div class="info" itemprop="episodes" itemscope itemtype="http://schema.org/TVEpisode">
    <meta itemprop="episodeNumber" content="{number}"/>
    <div class="airdate">
            {air_date}
    </div>
    <strong><a {click}href="/title/{episode_tt}/?ref_=ttep_ep_tt" title="{name}" itemprop="name">{name}</a></strong>
  </div>
</div>
"""


def make_page_html(declared: int, *blocks: str) -> str:
    return (
        '<div class="list detail eplist">'
        f'<meta itemprop="numberofEpisodes" content="{declared}" />'
        + "".join(blocks)
        + "</div>"
    )


THREE_BLOCKS = (
    make_block_html(1, "tt1480055", "Winter Is Coming", label="S1, Ep1", air_date="17 Apr. 2011"),
    make_block_html(2, "tt1668746", "The Kingsroad", label="S1, Ep2", air_date="January 5, 2001"),
    make_block_html(3, "tt1829962", "Lord Snow", label="S1, Ep3", air_date="Unknown"),
)


# ─── Tests: parse_episodes ────────────────────────────────────────────────────

class TestParseEpisodesBasic:

    def test_three_declared_three_parsed(self):
        eps = parse_episodes(make_page_html(3, *THREE_BLOCKS))
        assert len(eps) == 3

    def test_document_order_preserved(self):
        eps = parse_episodes(make_page_html(3, *THREE_BLOCKS))
        assert [ep.number for ep in eps] == [1, 2, 3]
        assert [ep.id for ep in eps]     == ["tt1480055", "tt1668746", "tt1829962"]

    def test_fields_extracted(self):
        ep = parse_episodes(make_page_html(3, *THREE_BLOCKS))[0]
        assert ep.number   == 1
        assert ep.id       == "tt1480055"
        assert ep.name     == "Winter Is Coming"
        assert ep.image    == "https://m.media-amazon.com/images/M/S1E1.jpg"
        assert ep.title    == "S1, Ep1"
        assert ep.air_date == "2011-04-17"

    def test_air_date_normalised(self):
        ep = parse_episodes(make_page_html(3, *THREE_BLOCKS))[1]
        assert ep.air_date == "2001-01-05"

    def test_unknown_air_date_absent(self):
        ep = parse_episodes(make_page_html(3, *THREE_BLOCKS))[2]
        assert ep.air_date is None
        assert "air_date" not in ep.to_dict()

    def test_name_entity_decoded(self):
        block = make_block_html(name="Fire &amp; Blood")
        ep    = parse_episodes(make_page_html(1, block))[0]
        assert ep.name == "Fire & Blood"

    def test_onclick_attribute_tolerated(self):
        block = make_block_html(onclick=True)
        eps   = parse_episodes(make_page_html(1, block))
        assert eps[0].id == "tt1480055"

    def test_zero_declared_zero_parsed(self):
        assert parse_episodes(make_page_html(0)) == []


class TestParseEpisodesFailures:

    def test_count_mismatch_is_fatal(self):
        with pytest.raises(CountMismatch) as exc_info:
            parse_episodes(make_page_html(3, *THREE_BLOCKS[:2]))
        assert exc_info.value.expected == 3
        assert exc_info.value.actual   == 2

    def test_more_parsed_than_declared_is_fatal(self):
        with pytest.raises(CountMismatch):
            parse_episodes(make_page_html(2, *THREE_BLOCKS))

    def test_malformed_block_not_counted(self):
        broken = THREE_BLOCKS[2].replace('itemprop="episodeNumber"', 'itemprop="other"')
        with pytest.raises(CountMismatch) as exc_info:
            parse_episodes(make_page_html(3, THREE_BLOCKS[0], THREE_BLOCKS[1], broken))
        assert exc_info.value.actual == 2

    def test_missing_count_marker_fails_sanity_check(self):
        with pytest.raises(SanityCheckFailed):
            parse_episodes("".join(THREE_BLOCKS))

    def test_expected_count_read(self):
        assert expected_episode_count(make_page_html(10)) == 10


# ─── Tests: normalize_air_date ────────────────────────────────────────────────

class TestNormalizeAirDate:

    @pytest.mark.parametrize("text, expected", [
        ("January 5, 2001", "2001-01-05"),
        ("5 Jan. 2001",     "2001-01-05"),
        ("Jan. 5, 2001",    "2001-01-05"),
        ("17 Apr. 2011",    "2011-04-17"),
        ("3 Sept. 2015",    "2015-09-03"),
        ("2001-01-05",      "2001-01-05"),
        ("  12 December 1999 ", "1999-12-12"),
    ])
    def test_formats(self, text, expected):
        assert normalize_air_date(text) == expected

    def test_month_and_year_only(self):
        assert normalize_air_date("Oct. 2017") == "2017-10-01"

    def test_year_only(self):
        assert normalize_air_date("2017") == "2017-01-01"

    def test_unparseable_returns_none(self):
        assert normalize_air_date("sometime soon") is None
