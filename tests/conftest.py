"""Shared fixtures for bot tests."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from covidbot.config import Settings
from covidbot.covid.interfaces import CountryStats, FetchResult
from covidbot.covid.service import CovidReportService


def _make_response(status_code: int = 200, payload=None, body: bytes = None) -> requests.Response:
    """Build a real requests.Response with a JSON (or raw) body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = "https://disease.sh/v3/covid-19/test"
    if body is None:
        body = json.dumps(payload).encode("utf-8")
    response._content = body
    return response


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def settings():
    return Settings(base_url="https://disease.sh/v3/covid-19/", menu_page_size=20)


@pytest.fixture
def japan_stats():
    return CountryStats(
        name="Japan",
        population=125000000,
        active=1234,
        critical=56,
        recovered=33000000,
        cases=33800000,
        deaths=74694,
        tests=100000000,
    )


@pytest.fixture
def stats_client(japan_stats):
    """Fake StatsClient returning Japan and a three-country list."""
    client = MagicMock()
    client.fetch_country.return_value = FetchResult.found(japan_stats)
    client.fetch_countries.return_value = FetchResult.found(["Afghanistan", "Albania", "Algeria"])
    return client


@pytest.fixture
def service(settings, stats_client):
    return CovidReportService(settings, client=stats_client)
