"""Telegram bot that answers Finglish messages with their Farsi transliteration."""

__version__ = "1.0.0"
