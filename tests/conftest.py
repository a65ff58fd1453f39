"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Project root holds config.py and app.py
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import Config


ENV_VARS = (
    "BOT_TOKEN",
    "RUN_MODE",
    "PORT",
    "WEBHOOK_HOST",
    "WEBHOOK_SECRET",
    "TELEGRAM_API_BASE",
    "TRANSLITERATOR",
    "REMOTE_API_URL",
    "REMOTE_TIMEOUT",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Clear every variable Config reads."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def local_cfg(clean_env):
    """Config using the built-in engine in polling mode."""
    clean_env.setenv("BOT_TOKEN", "123:abc")
    return Config()


@pytest.fixture
def remote_cfg(clean_env):
    """Config using the remote API backend."""
    clean_env.setenv("BOT_TOKEN", "123:abc")
    clean_env.setenv("TRANSLITERATOR", "remote")
    clean_env.setenv("REMOTE_API_URL", "https://convert.test/convert")
    return Config()


@pytest.fixture
def text_update():
    """Factory for stand-in telegram Updates carrying a text message."""
    def _make(text, chat_id=42):
        msg = MagicMock()
        msg.text = text
        msg.chat_id = chat_id
        msg.reply_text = AsyncMock()
        update = MagicMock()
        update.effective_message = msg
        return update
    return _make


@pytest.fixture
def context():
    """Stand-in for the handler context with an async bot."""
    ctx = MagicMock()
    ctx.bot.send_message = AsyncMock()
    return ctx
