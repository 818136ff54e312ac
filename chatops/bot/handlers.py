"""python-telegram-bot handlers.

The handlers only translate between Telegram updates and the
``CommandDispatcher``; all decisions are made by the dispatcher.
"""

from typing import Optional

import structlog
from telegram import Message, ReplyKeyboardMarkup, Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from ..models.reply import Reply
from ..services.dispatcher import CommandDispatcher
from ..utils import SecurityAudit
from ..utils.messages import split_message

logger = structlog.get_logger(__name__)

DISPATCHER_KEY = "dispatcher"


def build_keyboard(keyboard: Optional[list]) -> Optional[ReplyKeyboardMarkup]:
    """One-time keyboard shown only to the user who asked for it."""
    if not keyboard:
        return None
    return ReplyKeyboardMarkup(keyboard, one_time_keyboard=True, selective=True, resize_keyboard=True)


async def send_reply(message: Message, reply: Reply) -> None:
    """Send a reply as one or more messages.

    Long texts are split to fit Telegram's limit; the keyboard goes with
    the last chunk. Delivery errors are logged, never raised.
    """
    markup = build_keyboard(reply.keyboard)
    chunks = split_message(reply.text)
    for index, chunk in enumerate(chunks):
        last = index == len(chunks) - 1
        try:
            await message.reply_text(
                chunk,
                reply_markup=markup if last else None,
                # A selective keyboard only targets the sender of a quoted message
                do_quote=bool(last and markup),
            )
        except TelegramError as e:
            logger.error("Failed to send reply", chat_id=message.chat_id, error=str(e))
            return


async def audit_update(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log every inbound message before any other handler sees it."""
    message = update.effective_message
    if message is None:
        return
    user = update.effective_user
    SecurityAudit.log_inbound_message(
        chat_id=message.chat_id,
        user_id=user.id if user else None,
        text=message.text,
    )


async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Route a command or menu answer through the dispatcher."""
    message = update.effective_message
    if message is None or message.text is None:
        return

    dispatcher: CommandDispatcher = context.bot_data[DISPATCHER_KEY]
    reply = await dispatcher.dispatch(message.chat_id, message.text)
    if reply is None:
        return
    await send_reply(message, reply)


async def purge_expired_menus(context: ContextTypes.DEFAULT_TYPE) -> None:
    """Job callback dropping selection menus nobody answered."""
    dispatcher: CommandDispatcher = context.bot_data[DISPATCHER_KEY]
    purged = dispatcher.menus.purge_expired()
    if purged:
        logger.info("Purged expired selection menus", count=purged)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log exceptions raised by handlers."""
    chat_id = None
    if isinstance(update, Update) and update.effective_chat:
        chat_id = update.effective_chat.id
    logger.error(
        "Unhandled error while processing update",
        chat_id=chat_id,
        error=str(context.error),
        exc_info=context.error,
    )
