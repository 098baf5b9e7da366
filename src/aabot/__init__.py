"""Apache Answer bot for Slack: encrypted configuration and interaction log."""

__version__ = "0.3.0"
