"""Slack Bolt app for handling all Slack interactions.

This module builds a Bolt app that handles:
- Messages ('hello')
- Slash commands (/hello, /covid19)
- Block actions (back to list, refresh, country select)

Supports two modes:
1. Socket Mode: Uses WebSocket connection, no public URL needed
   - Requires SLACK_APP_TOKEN (xapp-...) with connections:write scope
2. HTTP Mode: Uses SlackRequestHandler with Flask routes
   - Requires SLACK_SIGNING_SECRET for request verification
"""

import logging
import threading

from covidbot.config import Settings
from covidbot.constants import ActionId, GREETING_KEYWORD, SlashCommand
from covidbot.errors import SlackNotConfiguredError
from covidbot.slack.router import (
    ACTION_TRIGGERS,
    Reply,
    Router,
    Trigger,
    TriggerEvent,
    action_value,
)
from covidbot.utils import log_diagnostic

logger = logging.getLogger(__name__)


def fallback_text(reply: dict) -> str:
    """Notification text for a reply: its plain text, or the header of a block reply."""
    if reply.get("text"):
        return reply["text"]
    for block in reply.get("blocks") or []:
        if block.get("type") == "header":
            return block["text"]["text"]
    return ""


def _respond_with(respond, reply: Reply):
    """Send a reply built by the router through Bolt's respond()."""
    if isinstance(reply, str):
        respond(text=reply)
    else:
        respond(text=fallback_text(reply), blocks=reply.get("blocks"))


def register_listeners(bolt_app, router: Router, settings: Settings):
    """Register every message, command and action listener on a Bolt app.

    Every command and action listener acknowledges before fetching and always
    responds, even when the stats API is unavailable.
    """
    verbose = settings.verbose

    # =========================================================================
    # Messages
    # =========================================================================

    @bolt_app.message(GREETING_KEYWORD)
    def handle_hello_message(message, say):
        """Reply to 'hello' in the channel it was posted to."""
        log_diagnostic(logger, verbose, "Message payload", message)

        reply = router.dispatch(TriggerEvent(
            trigger=Trigger.GREETING_MESSAGE,
            user_id=message.get("user", ""),
        ))
        say(reply)

    # =========================================================================
    # Slash Commands
    # =========================================================================

    @bolt_app.command(SlashCommand.HELLO)
    def handle_hello_command(ack, respond, command):
        """Handle /hello: time-of-day greeting."""
        ack()
        log_diagnostic(logger, verbose, "Command payload", command)

        reply = router.dispatch(TriggerEvent(
            trigger=Trigger.TIME_GREETING_COMMAND,
            user_id=command.get("user_id", ""),
        ))
        _respond_with(respond, reply)

    @bolt_app.command(SlashCommand.COVID19)
    def handle_covid19_command(ack, respond, command):
        """Handle /covid19 [country]: country menu or country statistics."""
        ack()
        log_diagnostic(logger, verbose, "Command payload", command)

        reply = router.dispatch(TriggerEvent(
            trigger=Trigger.COVID19_COMMAND,
            user_id=command.get("user_id", ""),
            argument=command.get("text", ""),
        ))
        log_diagnostic(logger, verbose, "Reply", reply)
        _respond_with(respond, reply)

    # =========================================================================
    # Block Actions (Button Clicks and Menu Selections)
    # =========================================================================

    @bolt_app.action(ActionId.GET_COUNTRIES)
    @bolt_app.action(ActionId.GET_INFO)
    @bolt_app.action(ActionId.SELECT_COUNTRY)
    def handle_country_action(ack, body, action, respond):
        """Handle back-to-list, refresh and country-select actions."""
        ack()
        log_diagnostic(logger, verbose, "Action payload", action)

        reply = router.dispatch(TriggerEvent(
            trigger=ACTION_TRIGGERS[action["action_id"]],
            user_id=body.get("user", {}).get("id", ""),
            argument=action_value(action),
        ))
        log_diagnostic(logger, verbose, "Reply", reply)
        _respond_with(respond, reply)

    return bolt_app


def create_bolt_app(settings: Settings, router: Router):
    """Build the Bolt app with all listeners registered.

    Raises:
        SlackNotConfiguredError: If SLACK_BOT_TOKEN is not set
    """
    if not settings.slack_enabled:
        raise SlackNotConfiguredError()

    from slack_bolt import App

    # ack() is answered right away; listeners finish on Bolt's worker pool
    bolt_app = App(
        token=settings.slack_bot_token,
        signing_secret=settings.slack_signing_secret
    )
    register_listeners(bolt_app, router, settings)
    logger.info("Slack Bolt app initialized")
    return bolt_app


def create_flask_handler(bolt_app):
    """Wrap a Bolt app for use from Flask routes."""
    from slack_bolt.adapter.flask import SlackRequestHandler
    return SlackRequestHandler(bolt_app)


def start_socket_mode(bolt_app, app_token: str):
    """Start a Socket Mode connection in a background thread.

    Socket Mode allows the app to receive events via WebSocket,
    eliminating the need for a public URL.

    Returns:
        The SocketModeHandler, for stop_socket_mode()
    """
    from slack_bolt.adapter.socket_mode import SocketModeHandler

    socket_mode_handler = SocketModeHandler(bolt_app, app_token)

    def run_socket_mode():
        try:
            logger.info("Starting Socket Mode connection...")
            socket_mode_handler.start()
        except Exception as e:
            logger.error(f"Socket Mode error: {e}")

    # Start in background thread so it doesn't block Flask
    thread = threading.Thread(target=run_socket_mode, daemon=True)
    thread.start()
    logger.info("Socket Mode started in background thread")
    return socket_mode_handler


def stop_socket_mode(socket_mode_handler):
    """Stop a Socket Mode connection."""
    try:
        socket_mode_handler.close()
        logger.info("Socket Mode stopped")
    except Exception as e:
        logger.error(f"Error stopping Socket Mode: {e}")
