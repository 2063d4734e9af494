"""Block Kit builders for a single country's statistics."""

from typing import Optional

from covidbot.constants import ActionId, BACK_TO_LIST_LABEL, REFRESH_LABEL
from covidbot.covid.interfaces import CountryStats
from covidbot.slack.blocks.common import (
    build_button,
    build_divider,
    build_header,
    build_plain_text_reply,
)
from covidbot.utils import format_number


def country_not_found_text(country: str) -> str:
    return f"Information for {country} was not found."


def build_stats_section(stats: CountryStats) -> dict:
    """Build the six-field statistics section.

    Field order is fixed: active, critical, recovered, cases, deaths, tests.
    """
    fields = [
        ("Active", stats.active),
        ("Critical", stats.critical),
        ("Recovered", stats.recovered),
        ("Total cases", stats.cases),
        ("Total deaths", stats.deaths),
        ("Tests", stats.tests),
    ]
    return {
        "type": "section",
        "fields": [
            {"type": "mrkdwn", "text": f"*{label}:* {format_number(value)}"}
            for label, value in fields
        ]
    }


def build_country_actions(country: str) -> dict:
    """Build the back-to-list and refresh buttons.

    Both carry the country name; only refresh uses it.
    """
    return {
        "type": "actions",
        "elements": [
            build_button(BACK_TO_LIST_LABEL, ActionId.GET_COUNTRIES, country),
            build_button(REFRESH_LABEL, ActionId.GET_INFO, country),
        ]
    }


def build_country_info_blocks(country: str, stats: Optional[CountryStats]) -> dict:
    """Build the reply for one country's statistics.

    Args:
        country: Requested country name (shown in the header and not-found text)
        stats: Statistics, or None if the country was not found

    Returns:
        {"blocks": [header, stats section, actions, divider]} or a plain-text
        not-found reply
    """
    if stats is None:
        return build_plain_text_reply(country_not_found_text(country))

    header = f"Country: {country}  Population: {format_number(stats.population)}"
    return {
        "blocks": [
            build_header(header),
            build_stats_section(stats),
            build_country_actions(country),
            build_divider(),
        ]
    }
