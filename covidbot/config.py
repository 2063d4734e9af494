"""Runtime configuration loaded from environment variables.

All settings are read once into a ``Settings`` instance which is then passed
explicitly to the stats client, report service, Bolt app and Flask factory.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import pytz
from dotenv import load_dotenv, find_dotenv

from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_MENU_PAGE_SIZE,
    DEFAULT_PORT,
    DEVELOPMENT_ENV,
    SLACK_MAX_SELECT_OPTIONS,
)
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def parse_page_size(raw: Optional[str]) -> int:
    """Parse the menu page size, falling back to the default.

    Absent, non-numeric and non-positive values all give DEFAULT_MENU_PAGE_SIZE.
    """
    if raw is None:
        return DEFAULT_MENU_PAGE_SIZE
    try:
        value = int(raw.strip())
    except (ValueError, AttributeError):
        return DEFAULT_MENU_PAGE_SIZE
    if value < 1:
        return DEFAULT_MENU_PAGE_SIZE
    if value > SLACK_MAX_SELECT_OPTIONS:
        logger.warning(f"NUM_OF_MENU_ITEMS={value} exceeds Slack's {SLACK_MAX_SELECT_OPTIONS} options per menu")
    return value


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"STATS_API_TIMEOUT must be a number, got {raw!r}")
    return value if value > 0 else None


def _parse_port(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"PORT must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """Bot configuration."""
    base_url: str = DEFAULT_BASE_URL
    menu_page_size: int = DEFAULT_MENU_PAGE_SIZE
    slack_bot_token: Optional[str] = None
    slack_app_token: Optional[str] = None       # xapp-... enables Socket Mode
    slack_signing_secret: Optional[str] = None
    environment: str = 'production'
    timezone: Optional[str] = None              # None -> server local time
    request_timeout: Optional[float] = None     # None -> requests default
    port: int = DEFAULT_PORT

    def __post_init__(self):
        if self.menu_page_size < 1:
            raise ConfigurationError("menu_page_size must be at least 1")
        if self.timezone:
            try:
                pytz.timezone(self.timezone)
            except pytz.UnknownTimeZoneError:
                raise ConfigurationError(f"Unknown timezone: {self.timezone}")
        # Normalize so path segments can always be joined with '/'
        object.__setattr__(self, 'base_url', self.base_url.rstrip('/'))

    @property
    def verbose(self) -> bool:
        """Whether raw payloads are written to the diagnostic log."""
        return self.environment == DEVELOPMENT_ENV

    @property
    def slack_enabled(self) -> bool:
        return bool(self.slack_bot_token)

    @property
    def socket_mode_enabled(self) -> bool:
        return bool(self.slack_bot_token and self.slack_app_token)

    @classmethod
    def from_env(cls, environ=None) -> 'Settings':
        """Build settings from a mapping (defaults to os.environ after loading .env)."""
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        return cls(
            base_url=environ.get('BASE_URL') or DEFAULT_BASE_URL,
            menu_page_size=parse_page_size(environ.get('NUM_OF_MENU_ITEMS')),
            slack_bot_token=environ.get('SLACK_BOT_TOKEN') or None,
            slack_app_token=environ.get('SLACK_APP_TOKEN') or None,
            slack_signing_secret=environ.get('SLACK_SIGNING_SECRET') or None,
            environment=(environ.get('APP_ENV') or environ.get('NODE_ENV') or 'production').lower(),
            timezone=environ.get('TIMEZONE') or None,
            request_timeout=_parse_timeout(environ.get('STATS_API_TIMEOUT')),
            port=_parse_port(environ.get('PORT')),
        )

    def redacted(self) -> dict:
        """Settings as a dict with secrets masked, for startup logging."""
        def mask(secret):
            if not secret:
                return None
            return '*' * max(len(secret) - 4, 0) + secret[-4:]

        return {
            'base_url': self.base_url,
            'menu_page_size': self.menu_page_size,
            'slack_bot_token': mask(self.slack_bot_token),
            'slack_app_token': mask(self.slack_app_token),
            'slack_signing_secret': mask(self.slack_signing_secret),
            'environment': self.environment,
            'timezone': self.timezone,
            'request_timeout': self.request_timeout,
            'port': self.port,
        }


def configure_logging(settings: Settings):
    """Configure root logging; DEBUG in development, INFO otherwise."""
    level = logging.DEBUG if settings.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )
    logging.getLogger().setLevel(level)
