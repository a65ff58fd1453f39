import asyncio
import logging

# Python 3.14+ has no default current event loop in MainThread
try:
    asyncio.get_event_loop()
except RuntimeError:
    asyncio.set_event_loop(asyncio.new_event_loop())

from dotenv import load_dotenv
load_dotenv()

from config import Config
from finglish.bot import build_application, run_local_polling, run_server_webhook

logging.basicConfig(level=logging.INFO)
# httpx logs every Bot API URL, token included
logging.getLogger("httpx").setLevel(logging.WARNING)


def main() -> None:
    cfg = Config()
    app = build_application(cfg)

    if cfg.run_mode == "local":
        run_local_polling(app)
    else:
        run_server_webhook(app, cfg)


if __name__ == "__main__":
    main()
