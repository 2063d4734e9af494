import logging
from typing import Optional

from flask import Flask

from .config import Settings, configure_logging
from .covid.service import CovidReportService
from .routes.main import main
from .routes.slack_interactivity import HANDLER_EXTENSION, slack_bp
from .slack.bolt_app import create_bolt_app, create_flask_handler
from .slack.router import Router
from .utils import current_time

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, service: Optional[CovidReportService] = None,
               bolt_app=None):
    """Build the Flask app and, when a bot token is configured, the Bolt app.

    Args:
        settings: Settings to use (loaded from the environment if None)
        service: Report service override (tests inject one with a fake client)
        bolt_app: Pre-built Bolt app override

    Returns:
        Flask app. The Bolt app, if any, is stored in app.extensions['slack_bolt'].
    """
    if settings is None:
        settings = Settings.from_env()

    configure_logging(settings)
    logger.info("Starting COVID-19 Slack bot")
    logger.info(f"Current time: {current_time(settings.timezone).isoformat()}")
    if settings.verbose:
        logger.info("Running in development mode")
        logger.info(f"Settings: {settings.redacted()}")

    app = Flask(__name__)
    app.config['SETTINGS'] = settings

    if service is None:
        service = CovidReportService(settings)

    if bolt_app is None and settings.slack_enabled:
        router = Router(settings, service)
        bolt_app = create_bolt_app(settings, router)

    if bolt_app is not None:
        app.extensions['slack_bolt'] = bolt_app
        app.extensions[HANDLER_EXTENSION] = create_flask_handler(bolt_app)
    else:
        logger.warning("SLACK_BOT_TOKEN not set - Slack integration disabled")

    app.register_blueprint(main)
    app.register_blueprint(slack_bp)

    return app
