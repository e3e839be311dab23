"""
Catalog Tests

Tests for movie records, the catalog store and the filter service.
"""

import logging
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from moviefilter.data.catalog_store import CatalogStore
from moviefilter.data.movie import MovieRecord
from moviefilter.data.validation import FLOOR_ERA_REASON, NOT_DECADE_REASON
from moviefilter.errors import EmptyCatalogError, InvalidDecadeError, NullStoreError
from moviefilter.service import FilterService


class TestMovieRecord:
    """Tests for MovieRecord."""

    def test_equal_records_hash_equal(self):
        """Test value equality and hashing agree."""
        a = MovieRecord.create("Heat", 1995, ["Crime", "Drama"], ["Al Pacino"])
        b = MovieRecord.create("Heat", 1995, ["Crime", "Drama"], ["Al Pacino"])

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_list_order_matters(self):
        """Test genre and cast comparison is order sensitive."""
        a = MovieRecord.create("Heat", 1995, ["Crime", "Drama"], ["Al Pacino", "Robert De Niro"])
        b = MovieRecord.create("Heat", 1995, ["Drama", "Crime"], ["Al Pacino", "Robert De Niro"])
        c = MovieRecord.create("Heat", 1995, ["Crime", "Drama"], ["Robert De Niro", "Al Pacino"])

        assert a != b
        assert a != c

    def test_each_field_participates_in_equality(self):
        base = MovieRecord.create("Heat", 1995, ["Crime"], ["Al Pacino"])

        assert base != MovieRecord.create("Heat 2", 1995, ["Crime"], ["Al Pacino"])
        assert base != MovieRecord.create("Heat", 1996, ["Crime"], ["Al Pacino"])

    def test_immutable(self):
        """Test fields can't be reassigned."""
        movie = MovieRecord.create("Heat", 1995)

        with pytest.raises(AttributeError):
            movie.year = 2000

    def test_copies_input_lists(self):
        """Test mutating the source lists doesn't change the record."""
        genres = ["Crime"]
        cast = ["Al Pacino"]
        movie = MovieRecord("Heat", 1995, genres, cast)

        genres.append("Drama")
        cast.clear()

        assert movie.genres == ("Crime",)
        assert movie.cast == ("Al Pacino",)

    def test_dict_form(self):
        """Test conversion to and from the JSON form."""
        data = {"title": "Heat", "year": 1995, "genres": ["Crime"], "cast": ["Al Pacino"]}
        movie = MovieRecord.from_dict(data)

        assert movie.genres == ("Crime",)
        assert movie.to_dict() == data

    def test_missing_lists_default_empty(self):
        movie = MovieRecord.from_dict({"title": "Heat", "year": 1995, "cast": None})

        assert movie.genres == ()
        assert movie.cast == ()

    @pytest.mark.parametrize("genres,cast", [
        ("Crime", ["Al Pacino"]),
        (["Crime"], "Al Pacino"),
    ])
    def test_bare_string_rejected(self, genres, cast):
        """Test a single string isn't split into characters."""
        with pytest.raises(TypeError):
            MovieRecord.create("Heat", 1995, genres, cast)

        with pytest.raises(TypeError):
            MovieRecord("Heat", 1995, genres, cast)


class TestCatalogStore:
    """Tests for CatalogStore."""

    def test_find_by_decade_range(self, boundary_movies):
        """Test only years in [2000, 2010) are returned."""
        store = CatalogStore(boundary_movies)

        result = store.find_by_decade(2000)

        assert {movie.year for movie in result} == {2000, 2009}
        assert result == {boundary_movies[1], boundary_movies[2]}

    def test_find_by_decade_century_rollover(self, boundary_movies):
        """Test the 1990s stop before 2000."""
        store = CatalogStore(boundary_movies)

        result = store.find_by_decade(1990)

        assert {movie.title for movie in result} == {"The Matrix"}

    def test_empty_result_is_not_an_error(self, boundary_movies):
        """Test a decade with no movies returns an empty set."""
        store = CatalogStore(boundary_movies)

        result = store.find_by_decade(1950)

        assert result is not None
        assert len(result) == 0

    def test_invalid_decade_propagates(self, boundary_movies):
        """Test validation failures surface unchanged."""
        store = CatalogStore(boundary_movies)

        with pytest.raises(InvalidDecadeError) as exc_info:
            store.find_by_decade(2005)
        assert exc_info.value.reason == NOT_DECADE_REASON

        with pytest.raises(InvalidDecadeError) as exc_info:
            store.find_by_decade(1890)
        assert exc_info.value.reason == FLOOR_ERA_REASON

    @pytest.mark.parametrize("records", [None, [], set(), ()])
    def test_empty_catalog_rejected(self, records):
        """Test a store needs at least one movie."""
        with pytest.raises(EmptyCatalogError):
            CatalogStore(records)

    def test_empty_generator_rejected(self):
        with pytest.raises(EmptyCatalogError):
            CatalogStore(movie for movie in [])

    def test_defensive_copy(self, boundary_movies):
        """Test later changes to the source list are not visible."""
        source = list(boundary_movies)
        store = CatalogStore(source)
        before = store.find_by_decade(2000)

        source.append(MovieRecord.create("Shrek", 2001))
        source.remove(boundary_movies[1])

        assert store.find_by_decade(2000) == before
        assert len(store) == 4

    def test_defensive_copy_of_set(self, boundary_movies):
        source = set(boundary_movies)
        store = CatalogStore(source)

        source.clear()

        assert len(store.find_by_decade(2000)) == 2

    def test_duplicates_collapse(self, boundary_movies):
        """Test equal records are stored once."""
        store = CatalogStore(boundary_movies + [MovieRecord.create(
            "Gladiator", 2000, ["Action", "Drama"], ["Russell Crowe"]
        )])

        assert len(store) == 4
        assert len(store.find_by_decade(2000)) == 2

    def test_result_is_immutable(self, boundary_movies):
        store = CatalogStore(boundary_movies)

        result = store.find_by_decade(2000)

        assert isinstance(result, frozenset)

    def test_read_only_views(self, boundary_movies):
        store = CatalogStore(boundary_movies)

        assert boundary_movies[0] in store
        assert set(store) == set(boundary_movies)

    def test_logs_decade_range(self, boundary_movies, caplog):
        """Test the lookup logs the half-open year range it searched."""
        store = CatalogStore(boundary_movies)

        with caplog.at_level(logging.DEBUG, logger="moviefilter.data.catalog_store"):
            store.find_by_decade(1990)

        assert "Found 1 movies in [1990, 2000)" in caplog.text

    def test_decades(self, boundary_movies):
        """Test decades present in the catalog are listed in order."""
        store = CatalogStore(boundary_movies + [MovieRecord.create("Metropolis", 1927)])

        assert store.decades() == [1920, 1990, 2000, 2010]


class TestFilterService:
    """Tests for FilterService."""

    def test_requires_store(self):
        """Test building without a store fails."""
        with pytest.raises(NullStoreError):
            FilterService(None)

    def test_filter_delegates_to_store(self, boundary_movies):
        store = CatalogStore(boundary_movies)
        service = FilterService(store)

        assert service.filter(2000) == store.find_by_decade(2000)

    def test_filter_is_idempotent(self, boundary_movies):
        """Test repeated calls return identical results."""
        service = FilterService(CatalogStore(boundary_movies))

        first = service.filter(2000)
        second = service.filter(2000)

        assert first == second

    def test_filter_propagates_invalid_decade(self, boundary_movies):
        service = FilterService(CatalogStore(boundary_movies))

        with pytest.raises(InvalidDecadeError):
            service.filter(1999)

    def test_validation_happens_once(self, boundary_movies, monkeypatch):
        """Test the service leaves validation to the store."""
        import moviefilter.data.catalog_store as catalog_store

        calls = []
        original = catalog_store.validate

        def counting_validate(year):
            calls.append(year)
            return original(year)

        monkeypatch.setattr(catalog_store, "validate", counting_validate)
        service = FilterService(CatalogStore(boundary_movies))

        service.filter(2000)

        assert calls == [2000]

    def test_available_decades(self, boundary_movies):
        service = FilterService(CatalogStore(boundary_movies))

        assert service.available_decades() == [1990, 2000, 2010]
