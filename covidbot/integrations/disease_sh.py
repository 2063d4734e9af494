"""
disease.sh COVID-19 API integration.

The API is free and requires no API key. We use three endpoints:
- /countries/{country}  statistics for one country
- /all                  aggregate statistics for the whole world
- /countries            statistics for every country (used for the name list)

API Documentation: https://disease.sh/docs/

Every failure is returned as a FetchResult variant rather than raised, so
callers always have something to reply with.
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

from covidbot.config import Settings
from covidbot.constants import AGGREGATE_COUNTRY, USER_AGENT
from covidbot.covid.interfaces import CountryStats, FetchResult

logger = logging.getLogger(__name__)


def _get_session() -> requests.Session:
    """Create a requests session with proper headers."""
    session = requests.Session()
    session.headers.update({
        'User-Agent': USER_AGENT,
        'Accept': 'application/json'
    })
    return session


class StatsClient:
    """Client for the disease.sh statistics API."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.base_url = settings.base_url
        self.timeout = settings.request_timeout
        self.session = session or _get_session()

    def country_path(self, country: str) -> str:
        """Path for a country's statistics; 'all' maps to the aggregate endpoint."""
        if country.strip().lower() == AGGREGATE_COUNTRY:
            return 'all'
        return f"countries/{quote(country, safe='')}"

    def _get_json(self, path: str) -> FetchResult[Any]:
        url = f"{self.base_url}/{path}"
        logger.info(f"Fetching {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to reach stats API at {url}: {e}")
            return FetchResult.upstream_error(str(e))

        if response.status_code == 404:
            logger.info(f"Stats API returned 404 for {url}")
            return FetchResult.not_found(f"404 for {path}")

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            logger.error(f"Stats API error for {url}: {e}")
            return FetchResult.upstream_error(str(e))

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Stats API returned invalid JSON for {url}: {e}")
            return FetchResult.upstream_error(f"invalid JSON: {e}")

        return FetchResult.found(data)

    def fetch_country(self, country: str) -> FetchResult[CountryStats]:
        """
        Get statistics for a single country, or world totals for 'all'.

        Args:
            country: Country name as typed or selected by the user

        Returns:
            FetchResult wrapping CountryStats when found
        """
        result = self._get_json(self.country_path(country))
        if not result.is_found:
            return result

        payload = result.data
        if not isinstance(payload, dict) or not payload:
            logger.warning(f"Unexpected payload for country {country!r}: {type(payload).__name__}")
            return FetchResult.upstream_error("expected a JSON object")

        # disease.sh answers unknown countries with a 'message' body
        if 'message' in payload and 'population' not in payload:
            logger.info(f"Country {country!r} not found upstream: {payload['message']}")
            return FetchResult.not_found(payload['message'])

        return FetchResult.found(CountryStats.from_payload(country, payload))

    def fetch_countries(self) -> FetchResult[list[str]]:
        """
        Get the list of country names in upstream order.

        Returns:
            FetchResult wrapping a list of names; an empty list is NOT_FOUND
        """
        result = self._get_json('countries')
        if not result.is_found:
            return result

        payload = result.data
        if not isinstance(payload, list):
            logger.warning(f"Unexpected payload for country list: {type(payload).__name__}")
            return FetchResult.upstream_error("expected a JSON array")

        names = []
        for record in payload:
            name = record.get('country') if isinstance(record, dict) else None
            if not name:
                logger.warning(f"Skipping country record without a name: {record!r}")
                continue
            names.append(str(name))

        if not names:
            logger.info("Stats API returned an empty country list")
            return FetchResult.not_found("empty country list")

        logger.info(f"Retrieved {len(names)} countries")
        return FetchResult.found(names)
