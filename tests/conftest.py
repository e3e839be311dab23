"""
Pytest Configuration and Fixtures

Shared fixtures for all tests.
"""

import json
import logging
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from moviefilter.data.movie import MovieRecord
from moviefilter.utils.logging_config import JSONFormatter, PrettyFormatter


@pytest.fixture
def boundary_movies():
    """One movie on each side of both edges of the 2000s."""
    return [
        MovieRecord.create("The Matrix", 1999, ["Sci-Fi", "Action"], ["Keanu Reeves"]),
        MovieRecord.create("Gladiator", 2000, ["Action", "Drama"], ["Russell Crowe"]),
        MovieRecord.create("Avatar", 2009, ["Sci-Fi", "Adventure"], ["Sam Worthington"]),
        MovieRecord.create("Inception", 2010, ["Action", "Sci-Fi"], ["Leonardo DiCaprio"]),
    ]


@pytest.fixture
def sample_catalog():
    """Catalog in its JSON form, spanning several decades."""
    return [
        {
            "title": "The Godfather",
            "year": 1972,
            "genres": ["Drama", "Crime"],
            "cast": ["Marlon Brando", "Al Pacino", "James Caan"]
        },
        {
            "title": "Back to the Future",
            "year": 1985,
            "genres": ["Adventure", "Comedy", "Sci-Fi"],
            "cast": ["Michael J. Fox", "Christopher Lloyd"]
        },
        {
            "title": "Blade Runner",
            "year": 1982,
            "genres": ["Sci-Fi", "Thriller"],
            "cast": ["Harrison Ford", "Rutger Hauer"]
        },
        {
            "title": "Heat",
            "year": 1995,
            "genres": ["Action", "Crime", "Drama"],
            "cast": ["Al Pacino", "Robert De Niro"]
        },
        {
            "title": "Soul",
            "year": 2020,
            "genres": ["Animation"],
            "cast": []
        },
    ]


@pytest.fixture
def catalog_json(tmp_path, sample_catalog):
    """JSON catalog file."""
    path = tmp_path / "movies.json"
    path.write_text(json.dumps(sample_catalog), encoding="utf-8")
    return path


@pytest.fixture
def catalog_csv(tmp_path, sample_catalog):
    """CSV catalog file with |-separated genres and cast."""
    lines = ["title,year,genres,cast"]
    for movie in sample_catalog:
        lines.append(
            f"\"{movie['title']}\",{movie['year']},"
            f"\"{'|'.join(movie['genres'])}\",\"{'|'.join(movie['cast'])}\""
        )
    path = tmp_path / "movies.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Keep handlers installed by setup_logging from leaking between tests."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, (JSONFormatter, PrettyFormatter)):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: marks tests that run the CLI or API end to end"
    )
