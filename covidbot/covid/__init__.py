"""COVID-19 statistics reports: data contracts and the fetch-and-format service."""

from covidbot.covid.interfaces import (
    CountryStats,
    FetchResult,
    FetchStatus,
    MenuOption,
    MenuPage,
)
from covidbot.covid.service import CovidReportService

__all__ = [
    'CountryStats',
    'FetchResult',
    'FetchStatus',
    'MenuOption',
    'MenuPage',
    'CovidReportService',
]
