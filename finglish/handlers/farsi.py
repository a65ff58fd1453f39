import logging

from telegram import Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from config import Config
from finglish.backend import to_farsi


async def on_finglish_text(cfg: Config, update: Update, context: ContextTypes.DEFAULT_TYPE):
    msg = update.effective_message
    if not msg or not msg.text:
        return

    finglish = msg.text.lower()
    if not finglish.strip():
        return

    chat_id = msg.chat_id
    text = await to_farsi(cfg, finglish)

    logging.info(f"Sending {text} to chat_id: {chat_id}")
    try:
        await context.bot.send_message(chat_id, text)
    except TelegramError as e:
        logging.warning(f"got error {e} from telegram for chat id {chat_id}")
        return

    logging.info(f"successfully distributed to chat id {chat_id}")
