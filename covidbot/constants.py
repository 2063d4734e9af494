from enum import Enum

# Upstream API
DEFAULT_BASE_URL = 'https://disease.sh/v3/covid-19'
USER_AGENT = 'covid19-slack-bot/1.0'
AGGREGATE_COUNTRY = 'all'

# Country selection menus
DEFAULT_MENU_PAGE_SIZE = 20

# Process
DEFAULT_PORT = 3000
DEVELOPMENT_ENV = 'development'


class SlashCommand:
    """Registered slash commands"""
    HELLO = '/hello'
    COVID19 = '/covid19'


class ActionId:
    """Block Kit action ids emitted by the controls we render"""
    GET_COUNTRIES = 'action-get-countries'   # Back to country list button
    GET_INFO = 'action-get-info'             # Refresh button
    SELECT_COUNTRY = 'action-select-country' # Country static_select

    ALL = [GET_COUNTRIES, GET_INFO, SELECT_COUNTRY]


GREETING_KEYWORD = 'hello'


class Greeting(str, Enum):
    MORNING = 'Good morning'
    DAYTIME = 'Hello'
    EVENING = 'Good evening'


# Hour ranges are [start, end)
MORNING_HOURS = (4, 10)
DAYTIME_HOURS = (10, 18)

# Reply text
COUNTRY_LIST_HEADER = 'Countries'
COUNTRY_SELECT_PLACEHOLDER = 'Select a country'
COUNTRY_LIST_NOT_FOUND = 'Country list not found.'
BACK_TO_LIST_LABEL = 'Back to country list'
REFRESH_LABEL = 'Refresh'

# Slack Block Kit limits
SLACK_MAX_SELECT_OPTIONS = 100
SLACK_MAX_MESSAGE_BLOCKS = 50
