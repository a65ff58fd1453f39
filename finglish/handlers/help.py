from telegram import Update
from telegram.ext import ContextTypes

from config import Config
from finglish.transliterator import convert

EXAMPLE = "salam, khoobi?"

HELP_TEXT = (
    "فینگلیش بنویس، فارسی تحویل بگیر.\n"
    "Send any Finglish text and the bot answers in Farsi script.\n\n"
    f"{EXAMPLE}\n"
    f"{convert(EXAMPLE)}\n"
)


async def cmd_help(cfg: Config, update: Update, context: ContextTypes.DEFAULT_TYPE):
    if update.effective_message:
        await update.effective_message.reply_text(HELP_TEXT)
