from aabot.models.base import Base
from aabot.models.bot_configuration import BotConfiguration
from aabot.models.slack_command import SlackCommand

__all__ = [
    "Base",
    "BotConfiguration",
    "SlackCommand",
]
