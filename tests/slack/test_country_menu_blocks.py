"""Tests for country menu pagination and Block Kit rendering."""

import logging
import math

import pytest

from covidbot.constants import ActionId
from covidbot.slack.blocks import build_country_menu_blocks, paginate_countries


def _names(count: int) -> list[str]:
    return [f"Country {i:03d}" for i in range(count)]


class TestPaginateCountries:
    """Tests for paginate_countries."""

    @pytest.mark.parametrize("count,page_size", [
        (0, 20), (1, 20), (19, 20), (20, 20), (21, 20), (215, 20), (7, 1), (10, 3),
    ])
    def test_page_and_option_counts(self, count, page_size):
        """Page count is ceil(N / page_size) and every name appears once."""
        names = _names(count)
        pages = paginate_countries(names, page_size)

        assert len(pages) == math.ceil(count / page_size)
        assert sum(len(page.options) for page in pages) == count

        for page in pages[:-1]:
            assert len(page.options) == page_size
        if pages:
            assert 1 <= len(pages[-1].options) <= page_size

    def test_empty_list_gives_no_pages(self):
        """No countries means no pages."""
        assert paginate_countries([], 20) == []

    def test_option_values_round_trip(self):
        """Option text and value are both the exact country name, in order."""
        names = ["Côte d'Ivoire", "Lao People's Democratic Republic", "S. Korea", "USA"]
        pages = paginate_countries(names, 3)

        flattened = [option for page in pages for option in page.options]
        assert [option.value for option in flattened] == names
        assert [option.text for option in flattened] == names

    def test_labels_use_page_number_and_first_country(self):
        """Labels are 1-based and name the first country on the page."""
        pages = paginate_countries(["A", "B", "C", "D", "E"], 2)

        assert [page.number for page in pages] == [1, 2, 3]
        assert pages[0].label == "[1] Country: A~"
        assert pages[1].label == "[2] Country: C~"
        assert pages[2].label == "[3] Country: E~"

    def test_upstream_order_is_preserved(self):
        """Names are not re-sorted."""
        names = ["Zimbabwe", "Albania", "Mexico"]
        pages = paginate_countries(names, 2)
        assert [option.value for option in pages[0].options] == ["Zimbabwe", "Albania"]
        assert [option.value for option in pages[1].options] == ["Mexico"]

    def test_deterministic(self):
        names = _names(45)
        assert paginate_countries(names, 20) == paginate_countries(names, 20)

    def test_page_size_below_one_rejected(self):
        with pytest.raises(ValueError):
            paginate_countries(["A"], 0)


class TestBuildCountryMenuBlocks:
    """Tests for build_country_menu_blocks."""

    def test_empty_list_is_plain_text_not_found(self):
        """An empty country list renders the not-found message, not a menu."""
        reply = build_country_menu_blocks([], 20)

        assert "blocks" not in reply
        assert reply["type"] == "plain_text"
        assert reply["text"] == "Country list not found."
        assert reply["emoji"] is True

    def test_layout_header_sections_divider(self):
        """Header, one select section per page, then a divider."""
        reply = build_country_menu_blocks(_names(45), 20)
        blocks = reply["blocks"]

        assert blocks[0]["type"] == "header"
        assert blocks[-1] == {"type": "divider"}
        sections = blocks[1:-1]
        assert len(sections) == 3
        assert all(block["type"] == "section" for block in sections)

    def test_select_accessory(self):
        """Each section carries a static_select wired to the select action."""
        reply = build_country_menu_blocks(["Japan", "Kenya"], 20)
        accessory = reply["blocks"][1]["accessory"]

        assert accessory["type"] == "static_select"
        assert accessory["action_id"] == ActionId.SELECT_COUNTRY
        assert accessory["options"] == [
            {"text": {"type": "plain_text", "text": "Japan"}, "value": "Japan"},
            {"text": {"type": "plain_text", "text": "Kenya"}, "value": "Kenya"},
        ]
        assert reply["blocks"][1]["text"]["text"] == "[1] Country: Japan~"

    def test_too_many_pages_warns(self, caplog):
        """Slack rejects messages over 50 blocks."""
        reply = build_country_menu_blocks(_names(100), 2)

        assert len(reply["blocks"]) == 52
        assert "Country menu needs 50 pages; Slack allows 48" in caplog.text

    def test_oversized_page_warns(self, caplog):
        build_country_menu_blocks(_names(150), 150)

        assert "exceeds Slack's 100 options" in caplog.text

    def test_typical_menu_is_quiet(self, caplog):
        build_country_menu_blocks(_names(215), 20)

        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
