"""Telegram application wiring."""

from typing import Optional

import structlog
from telegram import BotCommand, Update
from telegram.constants import ParseMode
from telegram.error import TelegramError
from telegram.ext import Application, ApplicationBuilder, MessageHandler, TypeHandler, filters

from ..config import Settings, get_settings
from ..services.dispatcher import CommandDispatcher
from .handlers import (
    DISPATCHER_KEY,
    audit_update,
    error_handler,
    handle_message,
    purge_expired_menus,
)

logger = structlog.get_logger(__name__)

STARTUP_MESSAGE = "*Chatops bot started*"

BOT_COMMANDS = [
    BotCommand("ps", "List containers"),
    BotCommand("logs", "Show the last log lines of a container"),
    BotCommand("restart", "Restart a container"),
    BotCommand("images", "List images"),
    BotCommand("version", "Show bot and Docker versions"),
]


async def announce_startup(application: Application) -> None:
    """Tell every allowed chat that the bot is up."""
    settings: Settings = application.bot_data["settings"]
    for chat_id in sorted(settings.allowed_chat_ids):
        try:
            await application.bot.send_message(chat_id=chat_id, text=STARTUP_MESSAGE, parse_mode=ParseMode.MARKDOWN)
        except TelegramError as e:
            logger.warning("Could not send startup message", chat_id=chat_id, error=str(e))


async def on_startup(application: Application) -> None:
    """post_init hook: publish the command list and announce startup."""
    settings: Settings = application.bot_data["settings"]
    try:
        await application.bot.set_my_commands(BOT_COMMANDS)
    except TelegramError as e:
        logger.warning("Could not register bot commands", error=str(e))

    if settings.telegram.announce_startup:
        await announce_startup(application)
    logger.info("*** Chatops bot started ***", allowed_chats=len(settings.allowed_chat_ids))


def register_handlers(application: Application, dispatcher: CommandDispatcher) -> None:
    """Attach the audit, command and selection handlers."""
    # Group -1 runs before the command handlers and does not stop them
    application.add_handler(TypeHandler(Update, audit_update), group=-1)

    # Edited messages and channel posts never trigger a command or selection
    new_messages = filters.UpdateType.MESSAGE
    application.add_handler(
        MessageHandler(new_messages & filters.Text(list(dispatcher.commands)), handle_message)
    )
    application.add_handler(MessageHandler(new_messages & filters.TEXT & ~filters.COMMAND, handle_message))
    application.add_error_handler(error_handler)


def schedule_menu_cleanup(application: Application, interval_seconds: int) -> None:
    """Periodically drop expired selection menus."""
    if application.job_queue is None:
        logger.warning("Job queue unavailable, expired menus are only dropped when answered")
        return
    application.job_queue.run_repeating(
        purge_expired_menus,
        interval=interval_seconds,
        first=interval_seconds,
        name="purge_expired_menus",
    )


def build_application(
    settings: Optional[Settings] = None,
    dispatcher: Optional[CommandDispatcher] = None,
) -> Application:
    """Build the Telegram application with all handlers registered."""
    settings = settings or get_settings()
    if dispatcher is None:
        from ..dependencies.services import get_dispatcher

        dispatcher = get_dispatcher()

    application = (
        ApplicationBuilder()
        .token(settings.telegram.bot_token)
        .concurrent_updates(True)
        .post_init(on_startup)
        .build()
    )
    application.bot_data["settings"] = settings
    application.bot_data[DISPATCHER_KEY] = dispatcher

    register_handlers(application, dispatcher)
    schedule_menu_cleanup(application, settings.menu_ttl_seconds)
    return application
