"""
tests/test_models_records.py
============================
Unit tests for the TitleRecord / EpisodeRecord dataclasses.
No network. Pure in-memory.
"""

import dataclasses
import json

import pytest

from imdbscrape.models import EpisodeRecord, ExactYear, Show, TitleRecord, YearRange


def make_title(**kwargs) -> TitleRecord:
    defaults = dict(id="tt0133093", name="The Matrix", rated="R")
    defaults.update(kwargs)
    return TitleRecord(**defaults)


def make_episode(**kwargs) -> EpisodeRecord:
    defaults = dict(
        number   = 1,
        id       = "tt1480055",
        name     = "Winter Is Coming",
        image    = "https://m.media-amazon.com/images/M/S1E1.jpg",
        title    = "S1, Ep1",
        air_date = "2011-04-17",
    )
    defaults.update(kwargs)
    return EpisodeRecord(**defaults)


class TestTitleRecord:

    def test_required_only_to_dict(self):
        assert make_title().to_dict() == {"id": "tt0133093", "name": "The Matrix", "rated": "R"}

    def test_exact_year_serialised_as_int(self):
        assert make_title(year=ExactYear(1999)).to_dict()["year"] == 1999

    def test_year_range_serialised_as_dict(self):
        d = make_title(year=YearRange(since=2011, until=None)).to_dict()
        assert d["year"] == {"since": 2011, "until": None}

    def test_show_serialised(self):
        d = make_title(show=Show(id="tt0944947", name="Game of Thrones")).to_dict()
        assert d["show"] == {"id": "tt0944947", "name": "Game of Thrones"}

    def test_lists_serialised_as_lists(self):
        d = make_title(genres=("Action", "Sci-Fi")).to_dict()
        assert d["genres"] == ["Action", "Sci-Fi"]

    def test_to_dict_is_json_serialisable(self):
        t = make_title(
            year=YearRange(2011, 2019), rating=9.2, votes=2000000,
            show=Show("tt1", "X"), cast=("A", "B"),
        )
        json.dumps(t.to_dict())

    def test_frozen(self):
        t = make_title()
        with pytest.raises(dataclasses.FrozenInstanceError):
            t.name = "Other"

    def test_str_contains_name_year_and_rating(self):
        s = str(make_title(year=ExactYear(1999), rating=8.7, votes=10))
        assert "The Matrix" in s
        assert "1999"       in s
        assert "8.7/10"     in s


class TestYearVariants:

    def test_range_str(self):
        assert str(YearRange(2011, 2019)) == "2011–2019"

    def test_open_range_str(self):
        assert str(YearRange(2019, None)) == "2019–"

    def test_exact_and_range_not_equal(self):
        assert ExactYear(2011) != YearRange(2011, 2011)


class TestEpisodeRecord:

    def test_all_fields_stored(self):
        ep = make_episode()
        assert ep.number   == 1
        assert ep.id       == "tt1480055"
        assert ep.title    == "S1, Ep1"
        assert ep.air_date == "2011-04-17"

    def test_air_date_defaults_none(self):
        ep = EpisodeRecord(number=1, id="tt1", name="n", image="i", title="t")
        assert ep.air_date is None

    def test_to_dict_omits_missing_air_date(self):
        d = make_episode(air_date=None).to_dict()
        assert "air_date" not in d
        assert set(d) == {"number", "id", "name", "image", "title"}

    def test_str_representation(self):
        s = str(make_episode())
        assert "Winter Is Coming" in s
        assert "2011-04-17"       in s

    def test_unicode_name(self):
        ep = make_episode(name="Shōnen Hero: 少年")
        assert ep.to_dict()["name"] == "Shōnen Hero: 少年"
