"""
Report service: fetch from the stats API and format Slack replies.

Both operations always return a reply payload. Upstream failures and
not-found results collapse into the same plain-text message; the distinction
is only kept in the logs.
"""

import logging

from covidbot.config import Settings
from covidbot.covid.interfaces import FetchStatus
from covidbot.integrations.disease_sh import StatsClient
from covidbot.slack.blocks import build_country_info_blocks, build_country_menu_blocks
from covidbot.utils import log_diagnostic

logger = logging.getLogger(__name__)


class CovidReportService:
    """Fetch-and-format operations used by every Slack trigger."""

    def __init__(self, settings: Settings, client: StatsClient = None):
        self.settings = settings
        self.client = client or StatsClient(settings)

    def country_report(self, country: str) -> dict:
        """Statistics reply for one country (or 'all' for world totals)."""
        result = self.client.fetch_country(country)
        log_diagnostic(logger, self.settings.verbose, f"Fetch result for {country!r}", result)

        if result.status is FetchStatus.UPSTREAM_ERROR:
            logger.warning(f"Stats API unavailable for {country!r}: {result.error}")

        stats = result.data if result.is_found else None
        return build_country_info_blocks(country, stats)

    def country_menu(self) -> dict:
        """Country selection menu reply."""
        result = self.client.fetch_countries()
        log_diagnostic(logger, self.settings.verbose, "Fetch result for country list", result)

        if result.status is FetchStatus.UPSTREAM_ERROR:
            logger.warning(f"Stats API unavailable for country list: {result.error}")

        names = result.data if result.is_found else []
        return build_country_menu_blocks(names, self.settings.menu_page_size)
