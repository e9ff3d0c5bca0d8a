"""Building blocks for Telegram bots: keyboards, media, polls, payments, middleware, configuration and webhook settings."""

__version__ = "0.1.0"