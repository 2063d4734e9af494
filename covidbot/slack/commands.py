"""Slack message and slash command handlers for /hello and /covid19."""

from covidbot.constants import DAYTIME_HOURS, Greeting, MORNING_HOURS
from covidbot.covid.service import CovidReportService


def mention(user_id: str) -> str:
    return f"<@{user_id}>"


def greeting_for_hour(hour: int) -> Greeting:
    """Pick a greeting for an hour of day (0-23).

    [4, 10) is morning, [10, 18) is daytime, everything else is evening.
    """
    if MORNING_HOURS[0] <= hour < MORNING_HOURS[1]:
        return Greeting.MORNING
    if DAYTIME_HOURS[0] <= hour < DAYTIME_HOURS[1]:
        return Greeting.DAYTIME
    return Greeting.EVENING


def handle_hello_message(user_id: str) -> str:
    """Reply to a plain 'hello' message."""
    return f"{Greeting.DAYTIME.value} {mention(user_id)}!"


def handle_hello_command(user_id: str, hour: int) -> str:
    """Handle /hello: greeting by time of day plus a mention of the caller.

    Args:
        user_id: Slack user ID of the caller
        hour: Current local hour (0-23)

    Returns:
        Response text, e.g. 'Good morning <@U123>!'
    """
    return f"{greeting_for_hour(hour).value} {mention(user_id)}!"


def handle_covid19_command(command_text: str, service: CovidReportService) -> dict:
    """Handle /covid19 [country].

    Args:
        command_text: Command arguments after /covid19
        service: Report service used to fetch and format

    Returns:
        Country menu reply when no country is given, otherwise the country's
        statistics reply
    """
    country = (command_text or '').strip()
    if not country:
        return service.country_menu()
    return service.country_report(country)
