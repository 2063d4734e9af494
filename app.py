import atexit

from covidbot import create_app
from covidbot.config import Settings
from covidbot.slack.bolt_app import start_socket_mode, stop_socket_mode

settings = Settings.from_env()
app = create_app(settings)

if settings.socket_mode_enabled:
    socket_mode_handler = start_socket_mode(app.extensions['slack_bolt'], settings.slack_app_token)
    atexit.register(stop_socket_mode, socket_mode_handler)

if __name__ == '__main__':
    app.run(port=settings.port, debug=settings.verbose, use_reloader=False)
