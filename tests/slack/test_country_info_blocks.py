"""Tests for the single-country statistics Block Kit builder."""

from covidbot.constants import ActionId
from covidbot.covid.interfaces import CountryStats
from covidbot.slack.blocks import build_country_info_blocks


class TestBuildCountryInfoBlocks:
    """Tests for build_country_info_blocks."""

    def test_header_has_country_and_grouped_population(self, japan_stats):
        reply = build_country_info_blocks("Japan", japan_stats)
        header = reply["blocks"][0]

        assert header["type"] == "header"
        assert "Japan" in header["text"]["text"]
        assert "125,000,000" in header["text"]["text"]

    def test_block_order(self, japan_stats):
        """Header, stats section, actions, divider."""
        reply = build_country_info_blocks("Japan", japan_stats)
        assert [block["type"] for block in reply["blocks"]] == [
            "header", "section", "actions", "divider"
        ]

    def test_fields_in_fixed_order(self, japan_stats):
        reply = build_country_info_blocks("Japan", japan_stats)
        texts = [field["text"] for field in reply["blocks"][1]["fields"]]

        assert texts == [
            "*Active:* 1,234",
            "*Critical:* 56",
            "*Recovered:* 33,000,000",
            "*Total cases:* 33,800,000",
            "*Total deaths:* 74,694",
            "*Tests:* 100,000,000",
        ]

    def test_missing_values_render_as_zero(self):
        """Absent fields render as 0, never None or nan."""
        stats = CountryStats.from_payload("Atlantis", {"population": None, "active": 0})
        reply = build_country_info_blocks("Atlantis", stats)

        texts = [field["text"] for field in reply["blocks"][1]["fields"]]
        assert texts[0] == "*Active:* 0"
        assert all(text.endswith(" 0") for text in texts)
        header = reply["blocks"][0]["text"]["text"]
        assert "None" not in header and "nan" not in header.lower()
        assert header.endswith("Population: 0")

    def test_buttons_carry_country(self, japan_stats):
        """Back and refresh buttons both carry the country name."""
        reply = build_country_info_blocks("Japan", japan_stats)
        back, refresh = reply["blocks"][2]["elements"]

        assert back["action_id"] == ActionId.GET_COUNTRIES
        assert back["value"] == "Japan"
        assert refresh["action_id"] == ActionId.GET_INFO
        assert refresh["value"] == "Japan"

    def test_not_found_is_plain_text(self):
        reply = build_country_info_blocks("Narnia", None)

        assert reply == {
            "type": "plain_text",
            "text": "Information for Narnia was not found.",
            "emoji": True,
        }
