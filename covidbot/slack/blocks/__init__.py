"""Slack Block Kit builders for COVID-19 replies.

This package re-exports all public symbols from its sub-modules so callers
can import from ``covidbot.slack.blocks`` directly.
"""

from covidbot.slack.blocks.common import (
    build_button,
    build_divider,
    build_header,
    build_plain_text_reply,
)
from covidbot.slack.blocks.countries import (
    paginate_countries,
    build_country_select_section,
    build_country_menu_blocks,
)
from covidbot.slack.blocks.country_info import (
    country_not_found_text,
    build_stats_section,
    build_country_actions,
    build_country_info_blocks,
)

__all__ = [
    # common
    "build_button",
    "build_divider",
    "build_header",
    "build_plain_text_reply",
    # countries
    "paginate_countries",
    "build_country_select_section",
    "build_country_menu_blocks",
    # country_info
    "country_not_found_text",
    "build_stats_section",
    "build_country_actions",
    "build_country_info_blocks",
]
