import asyncio
import logging

from config import Config
from finglish.remote import RemoteTransliterationError, RemoteTransliterator
from finglish.transliterator import convert


def remote_client(cfg: Config) -> RemoteTransliterator:
    return RemoteTransliterator(api_url=cfg.remote_api_url, timeout=cfg.remote_timeout)


async def to_farsi(cfg: Config, text: str) -> str:
    """Transliterate with the configured backend; remote failures fall back to the local engine."""
    if cfg.backend == "local":
        return convert(text)

    try:
        return await asyncio.to_thread(remote_client(cfg).convert, text)
    except RemoteTransliterationError as e:
        logging.warning(f"remote transliteration failed, using local engine: {e}")
        return convert(text)
