"""
Unit tests for dataset loading.

Loading is all-or-nothing and never raises.
"""

import json

import pytest

from movie_catalog.core.catalog import CatalogFormatError, load_catalog, parse_catalog


def _entry(**overrides):
    entry = {
        "id": 1,
        "movieName": "The Prison Escape",
        "director": "John Director",
        "year": 1994,
        "genre": "Drama",
        "description": "Two imprisoned men bond.",
        "duration": 142,
        "imdbRating": 5.0,
    }
    entry.update(overrides)
    return entry


@pytest.fixture
def write_dataset(tmp_path):
    """Write a dataset (JSON-encoded unless raw) and return its path."""
    def _write(payload, raw=False):
        path = tmp_path / "movies.json"
        path.write_text(payload if raw else json.dumps(payload), encoding="utf-8")
        return path
    return _write


def test_load_valid_dataset(write_dataset):
    """Well-formed entries load in file order with their fields mapped."""
    path = write_dataset([_entry(), _entry(id=2, movieName="The Family Boss", genre="Crime, Drama")])
    result = load_catalog(path)
    assert result.ok
    assert [m.id for m in result.movies] == [1, 2]
    movie = result.movies[0]
    assert movie.name == "The Prison Escape"
    assert movie.rating == 5.0
    assert movie.duration == 142


def test_integer_rating_is_widened(write_dataset):
    """An integer imdbRating is accepted and stored as float."""
    result = load_catalog(write_dataset([_entry(imdbRating=4)]))
    assert result.ok
    assert isinstance(result.movies[0].rating, float)


def test_empty_array_is_ok(write_dataset):
    """An empty array is a successful load of zero movies."""
    result = load_catalog(write_dataset([]))
    assert result.ok
    assert result.movies == ()


def test_missing_file(tmp_path):
    """A missing file yields an empty result with an error."""
    result = load_catalog(tmp_path / "nope.json")
    assert not result.ok
    assert "not found" in result.error
    assert result.movies == ()


def test_invalid_json(write_dataset):
    """Undecodable JSON yields an empty result with an error."""
    result = load_catalog(write_dataset("[{not json", raw=True))
    assert not result.ok
    assert result.movies == ()


def test_deeply_nested_json(write_dataset):
    """JSON nested past the interpreter's recursion limit fails soft."""
    result = load_catalog(write_dataset("[" * 100000 + "]" * 100000, raw=True))
    assert not result.ok
    assert result.movies == ()


def test_top_level_must_be_array(write_dataset):
    """A JSON object at the top level is rejected."""
    result = load_catalog(write_dataset({"movies": []}))
    assert not result.ok


@pytest.mark.parametrize(
    "overrides",
    [
        {"id": "1"},
        {"id": True},
        {"id": 0},
        {"year": 1994.5},
        {"duration": None},
        {"imdbRating": "high"},
        {"movieName": 42},
        {"movieName": "   "},
    ],
)
def test_malformed_entry_discards_whole_file(write_dataset, overrides):
    """One bad entry empties the whole catalog, valid entries included."""
    path = write_dataset([_entry(id=5, movieName="Fine"), _entry(**overrides)])
    result = load_catalog(path)
    assert not result.ok
    assert result.movies == ()


def test_missing_field(write_dataset):
    """The error names the missing field."""
    entry = _entry()
    del entry["director"]
    result = load_catalog(write_dataset([entry]))
    assert not result.ok
    assert "director" in result.error


def test_duplicate_ids(write_dataset):
    """Repeated ids are rejected."""
    result = load_catalog(write_dataset([_entry(), _entry(movieName="Copy")]))
    assert not result.ok
    assert "duplicate" in result.error


def test_load_failure_is_logged(tmp_path, caplog):
    """A failed load logs a warning instead of raising."""
    with caplog.at_level("WARNING"):
        load_catalog(tmp_path / "nope.json")
    assert "empty catalog" in caplog.text


def test_parse_catalog_reports_entry_index():
    """parse_catalog raises with the index of the bad entry."""
    with pytest.raises(CatalogFormatError, match="Entry 1"):
        parse_catalog([_entry(), "not an object"])
