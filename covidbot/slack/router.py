"""Routing of Slack triggers to reply operations.

Six listeners feed a closed set of triggers; each trigger maps to one entry in
ROUTES. The two fetching operations are the country menu and the country
report.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from covidbot.config import Settings
from covidbot.constants import ActionId, GREETING_KEYWORD, SlashCommand
from covidbot.covid.service import CovidReportService
from covidbot.slack.commands import (
    handle_covid19_command,
    handle_hello_command,
    handle_hello_message,
)
from covidbot.utils import current_hour

logger = logging.getLogger(__name__)

Reply = Union[str, dict]


class Trigger(str, Enum):
    """Every inbound event the bot reacts to."""
    GREETING_MESSAGE = f"message:{GREETING_KEYWORD}"
    TIME_GREETING_COMMAND = SlashCommand.HELLO
    COVID19_COMMAND = SlashCommand.COVID19
    BACK_TO_LIST_ACTION = ActionId.GET_COUNTRIES
    REFRESH_ACTION = ActionId.GET_INFO
    SELECT_ACTION = ActionId.SELECT_COUNTRY


ACTION_TRIGGERS = {
    ActionId.GET_COUNTRIES: Trigger.BACK_TO_LIST_ACTION,
    ActionId.GET_INFO: Trigger.REFRESH_ACTION,
    ActionId.SELECT_COUNTRY: Trigger.SELECT_ACTION,
}


@dataclass(frozen=True)
class TriggerEvent:
    """Normalized inbound event."""
    trigger: Trigger
    user_id: str = ''
    argument: str = ''     # Command text or action value (a country name)


def action_value(action: dict) -> str:
    """Extract the value carried by a button or static_select action."""
    selected = action.get("selected_option")
    if selected:
        return selected.get("value", "")
    return action.get("value", "")


class Router:
    """Dispatches TriggerEvents through ROUTES."""

    def __init__(self, settings: Settings, service: CovidReportService,
                 hour_provider: Optional[Callable[[], int]] = None):
        self.settings = settings
        self.service = service
        self.hour_provider = hour_provider or (lambda: current_hour(settings.timezone))

    def dispatch(self, event: TriggerEvent) -> Reply:
        route = ROUTES[event.trigger]
        logger.debug(f"Dispatching {event.trigger.name} for user {event.user_id or '-'}")
        return route(self, event)

    def greeting(self, event: TriggerEvent) -> Reply:
        return handle_hello_message(event.user_id)

    def time_greeting(self, event: TriggerEvent) -> Reply:
        return handle_hello_command(event.user_id, self.hour_provider())

    def covid19(self, event: TriggerEvent) -> Reply:
        return handle_covid19_command(event.argument, self.service)

    def country_report(self, event: TriggerEvent) -> Reply:
        return self.service.country_report(event.argument)

    def country_menu(self, event: TriggerEvent) -> Reply:
        # The button value (previously shown country) is not needed here
        return self.service.country_menu()


ROUTES: dict[Trigger, Callable[[Router, TriggerEvent], Reply]] = {
    Trigger.GREETING_MESSAGE: Router.greeting,
    Trigger.TIME_GREETING_COMMAND: Router.time_greeting,
    Trigger.COVID19_COMMAND: Router.covid19,
    Trigger.BACK_TO_LIST_ACTION: Router.country_menu,
    Trigger.REFRESH_ACTION: Router.country_report,
    Trigger.SELECT_ACTION: Router.country_report,
}
