from flask import Blueprint, current_app

from covidbot.errors import json_success
from covidbot.routes.slack_interactivity import HANDLER_EXTENSION

main = Blueprint('main', __name__)


@main.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    return json_success({
        'slack_configured': HANDLER_EXTENSION in current_app.extensions
    })
