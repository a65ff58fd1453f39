import hashlib
import os

from finglish.remote import DEFAULT_API_URL, DEFAULT_TIMEOUT

TELEGRAM_API_BASE = "https://api.telegram.org/bot"


class Config:
    """Runtime configuration loaded from environment variables.

    RUN_MODE:
      - local  : long polling (best for development)
      - server : webhook + minimal HTTP server

    TRANSLITERATOR:
      - local  : built-in rule engine
      - remote : behnevis.com conversion API (falls back to local on failure)

    Notes:
      - In local mode, WEBHOOK_HOST is NOT required.
      - In server mode, WEBHOOK_HOST is required.
    """

    def __init__(self) -> None:
        self.bot_token: str = os.getenv("BOT_TOKEN", "").strip()
        self.telegram_api_base: str = os.getenv("TELEGRAM_API_BASE", TELEGRAM_API_BASE).strip()

        self.run_mode: str = os.getenv("RUN_MODE", "local").strip().lower()
        if self.run_mode not in ("local", "server"):
            raise RuntimeError("RUN_MODE must be 'local' or 'server'")

        self.backend: str = os.getenv("TRANSLITERATOR", "local").strip().lower()
        if self.backend not in ("local", "remote"):
            raise RuntimeError("TRANSLITERATOR must be 'local' or 'remote'")
        self.remote_api_url: str = os.getenv("REMOTE_API_URL", DEFAULT_API_URL).strip()
        self.remote_timeout: float = float(os.getenv("REMOTE_TIMEOUT", str(DEFAULT_TIMEOUT)))

        # Server-mode only
        self.port: int = int(os.getenv("PORT", "10000"))
        self.webhook_host: str = os.getenv("WEBHOOK_HOST", "").strip()  # e.g. https://your-app.onrender.com
        self.webhook_secret: str = os.getenv("WEBHOOK_SECRET", "").strip()

        if not self.bot_token:
            raise RuntimeError("BOT_TOKEN is not set")
        if self.run_mode == "server" and not self.webhook_host:
            raise RuntimeError("WEBHOOK_HOST is required in server mode")

        if not self.webhook_secret:
            # keep the raw token out of the URL
            self.webhook_secret = hashlib.sha256(self.bot_token.encode("utf-8")).hexdigest()[:32]

    @property
    def webhook_path(self) -> str:
        return f"/webhook/{self.webhook_secret}"

    @property
    def webhook_url(self) -> str:
        if not self.webhook_host:
            return ""
        return self.webhook_host.rstrip("/") + self.webhook_path
