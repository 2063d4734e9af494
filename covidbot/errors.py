"""Centralized error handling utilities.

Exceptions raised while wiring the bot together, plus consistent JSON
responses for the Flask routes. Failures talking to the stats API are not
exceptions here: they surface as FetchResult variants.
"""

from flask import jsonify


# =============================================================================
# Custom Exceptions
# =============================================================================

class AppError(Exception):
    """Base application error."""
    def __init__(self, message):
        self.message = message
        super().__init__(message)


class ConfigurationError(AppError):
    """Raised when settings are missing or invalid."""


class SlackNotConfiguredError(AppError):
    """Raised when a Slack component is requested without a bot token."""
    def __init__(self, message="SLACK_BOT_TOKEN not configured"):
        super().__init__(message)


# =============================================================================
# JSON Response Helpers (for HTTP routes)
# =============================================================================

def json_error(message, status_code=400):
    """Return a standardized JSON error response.

    Args:
        message: Error message string
        status_code: HTTP status code (default 400)

    Returns:
        Tuple of (response, status_code)
    """
    return jsonify({'error': message}), status_code


def json_success(data=None):
    """Return a standardized JSON success response.

    Args:
        data: Optional dict of additional response data

    Returns:
        JSON response with status='success' plus any additional data
    """
    response = {'status': 'success'}
    if data:
        response.update(data)
    return jsonify(response)
