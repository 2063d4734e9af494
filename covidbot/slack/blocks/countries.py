"""Block Kit builders for the paginated country selection menu."""

import logging
import math

from covidbot.constants import (
    ActionId,
    COUNTRY_LIST_HEADER,
    COUNTRY_LIST_NOT_FOUND,
    COUNTRY_SELECT_PLACEHOLDER,
    SLACK_MAX_MESSAGE_BLOCKS,
    SLACK_MAX_SELECT_OPTIONS,
)
from covidbot.covid.interfaces import MenuOption, MenuPage
from covidbot.slack.blocks.common import build_divider, build_header, build_plain_text_reply

logger = logging.getLogger(__name__)


def paginate_countries(names: list[str], page_size: int) -> list[MenuPage]:
    """Split country names into dropdown pages.

    Pages hold ``page_size`` countries each except the last, which holds the
    remainder. Upstream order is preserved.

    Args:
        names: Country names in upstream order
        page_size: Maximum options per page (>= 1)

    Returns:
        ceil(len(names) / page_size) pages; empty list when there are no names

    Raises:
        ValueError: If page_size is less than 1
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    page_count = math.ceil(len(names) / page_size)
    pages = []
    for index in range(page_count):
        chunk = names[index * page_size:(index + 1) * page_size]
        number = index + 1
        pages.append(MenuPage(
            number=number,
            label=f"[{number}] Country: {chunk[0]}~",
            options=[MenuOption(text=name, value=name) for name in chunk]
        ))
    return pages


def build_country_select_section(page: MenuPage) -> dict:
    """Build a section block with a static_select for one menu page."""
    return {
        "type": "section",
        "text": {
            "type": "mrkdwn",
            "text": page.label
        },
        "accessory": {
            "action_id": ActionId.SELECT_COUNTRY,
            "type": "static_select",
            "placeholder": {
                "type": "plain_text",
                "text": COUNTRY_SELECT_PLACEHOLDER
            },
            "options": [
                {
                    "text": {"type": "plain_text", "text": option.text},
                    "value": option.value
                }
                for option in page.options
            ]
        }
    }


def build_country_menu_blocks(names: list[str], page_size: int) -> dict:
    """Build the country menu reply.

    Args:
        names: Country names in upstream order
        page_size: Countries per dropdown

    Returns:
        {"blocks": [...]} with one dropdown per page, or a plain-text
        not-found reply when there are no names
    """
    pages = paginate_countries(names, page_size)
    if not pages:
        return build_plain_text_reply(COUNTRY_LIST_NOT_FOUND)

    # Header and trailing divider take two of the message's blocks
    if len(pages) + 2 > SLACK_MAX_MESSAGE_BLOCKS:
        logger.warning(f"Country menu needs {len(pages)} pages; Slack allows {SLACK_MAX_MESSAGE_BLOCKS - 2}")
    if page_size > SLACK_MAX_SELECT_OPTIONS:
        logger.warning(f"Menu page size {page_size} exceeds Slack's {SLACK_MAX_SELECT_OPTIONS} options per menu")

    blocks = [build_header(COUNTRY_LIST_HEADER)]
    blocks.extend(build_country_select_section(page) for page in pages)
    blocks.append(build_divider())
    return {"blocks": blocks}
