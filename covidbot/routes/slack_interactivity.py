"""Slack interactivity webhook endpoints using Slack Bolt.

This module provides Flask endpoints that delegate to the Slack Bolt app
for handling all Slack interactions (events, commands, interactions).

Bolt handles:
- Request signature verification
- Event parsing and routing
- Acknowledgement of requests
"""

from flask import Blueprint, current_app, request

from covidbot.errors import json_error

slack_bp = Blueprint('slack', __name__, url_prefix='/slack')

HANDLER_EXTENSION = 'slack_handler'


def _handle_request():
    """Handle a Slack request, returning 503 if Bolt is not configured."""
    handler = current_app.extensions.get(HANDLER_EXTENSION)
    if handler is None:
        return json_error("Slack integration not configured", 503)
    return handler.handle(request)


@slack_bp.route('/events', methods=['POST'])
def slack_events():
    """Handle Slack Event API callbacks.

    Delegates to Bolt app which handles:
    - URL verification challenge
    - message events ('hello')
    """
    return _handle_request()


@slack_bp.route('/commands', methods=['POST'])
def slack_commands():
    """Handle Slack slash commands.

    Delegates to Bolt app which handles:
    - /hello
    - /covid19 [country]
    """
    return _handle_request()


@slack_bp.route('/interactions', methods=['POST'])
def slack_interactions():
    """Handle Slack interactive components.

    Delegates to Bolt app which handles:
    - Button clicks (back to country list, refresh)
    - Country menu selections
    """
    return _handle_request()
