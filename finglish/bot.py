from __future__ import annotations

import asyncio
import json
import logging
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

from telegram import Bot, Update
from telegram.ext import Application, CommandHandler, MessageHandler, filters
from telegram.request import HTTPXRequest

from config import Config
from finglish.handlers.farsi import on_finglish_text
from finglish.handlers.help import cmd_help


class InvalidUpdate(ValueError):
    """Inbound webhook body that cannot be turned into an Update."""

    def __init__(self, reason: str, detail: str = ""):
        super().__init__(f"{reason}: {detail}" if detail else reason)
        self.reason = reason


def parse_update(raw: bytes, bot: Bot | None) -> Update:
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise InvalidUpdate("Bad JSON", str(e)) from e

    if not isinstance(data, dict):
        raise InvalidUpdate("Bad Update", "payload is not an object")
    # Telegram never sends update_id 0; it means nothing was decoded
    if not data.get("update_id"):
        raise InvalidUpdate("Bad Update", "invalid update id of 0 indicates failure to parse incoming update")

    try:
        return Update.de_json(data, bot)
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidUpdate("Bad Update", str(e)) from e


# ---------------- app build ----------------
def build_application(cfg: Config) -> Application:
    # Increase timeouts to reduce startup failures on Render
    request = HTTPXRequest(connect_timeout=30.0, read_timeout=30.0, write_timeout=30.0, pool_timeout=30.0)

    app = (
        Application.builder()
        .token(cfg.bot_token)
        .base_url(cfg.telegram_api_base)
        .request(request)
        .build()
    )

    app.add_handler(CommandHandler("help", lambda u, c: cmd_help(cfg, u, c)))
    app.add_handler(CommandHandler("start", lambda u, c: cmd_help(cfg, u, c)))

    # every plain text message is Finglish to convert
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, lambda u, c: on_finglish_text(cfg, u, c)))

    async def _post_init(application: Application):
        logging.info(f"Transliteration backend: {cfg.backend}")
        if cfg.run_mode == "server":
            await application.bot.set_webhook(url=cfg.webhook_url, drop_pending_updates=True)
            logging.info(f"Webhook set: {cfg.webhook_host.rstrip('/')}/webhook/***")

    app.post_init = _post_init
    return app


def run_local_polling(app: Application) -> None:
    logging.info("Starting in LOCAL mode (polling)")
    app.run_polling(drop_pending_updates=True)


# ---------------- minimal webhook server (server mode) ----------------
class WebhookHandler(BaseHTTPRequestHandler):
    loop: asyncio.AbstractEventLoop | None = None
    application: Application | None = None
    webhook_path: str = "/"

    def _send(self, code=200, body=b"OK"):
        self.send_response(code)
        self.send_header("Content-Type", "text/plain")
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self):
        if self.path == "/":
            return self._send(200, b"OK")
        return self._send(404, b"Not Found")

    def do_POST(self):
        if self.path != self.webhook_path:
            return self._send(404, b"Not Found")

        try:
            length = int(self.headers.get("Content-Length", "0"))
        except ValueError:
            length = -1
        if length < 0:
            logging.warning(f"bad Content-Length header: {self.headers.get('Content-Length')!r}")
            return self._send(400, b"Bad Request")
        raw = self.rfile.read(length)

        if not self.loop or not self.application:
            return self._send(503, b"App not ready")

        try:
            update = parse_update(raw, self.application.bot)
        except InvalidUpdate as e:
            logging.warning(f"error parsing update, {e}")
            return self._send(400, e.reason.encode("utf-8"))

        asyncio.run_coroutine_threadsafe(self.application.process_update(update), self.loop)
        return self._send(200, b"OK")

    def log_message(self, format, *args):
        # the request line carries the webhook secret
        logging.debug(format % args)


def run_server_webhook(app: Application, cfg: Config) -> None:
    logging.info("Starting in SERVER mode (webhook)")

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    async def _startup():
        await app.initialize()
        if app.post_init:
            await app.post_init(app)
        await app.start()
        logging.info("Application started")

    loop.run_until_complete(_startup())

    WebhookHandler.loop = loop
    WebhookHandler.application = app
    WebhookHandler.webhook_path = cfg.webhook_path

    server = HTTPServer(("0.0.0.0", cfg.port), WebhookHandler)
    logging.info(f"Listening on 0.0.0.0:{cfg.port} (health: / , webhook: /webhook/***)")

    t = threading.Thread(target=server.serve_forever, daemon=True)
    t.start()

    try:
        loop.run_forever()
    finally:
        server.shutdown()
        loop.run_until_complete(app.stop())
        loop.run_until_complete(app.shutdown())
        loop.close()
