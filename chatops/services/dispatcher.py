"""Command dispatch for the chat front end.

The dispatcher is transport-agnostic: it takes a chat id and the message
text and returns the ``Reply`` to send, or ``None`` when the bot must stay
silent (unauthorized chat, unrelated text).
"""

from typing import Awaitable, Callable, Dict, Optional

import structlog

from .._version import __version__
from ..models.errors import EngineError
from ..models.menu import FlowKind, PendingSelection
from ..models.reply import Reply
from ..utils.formatting import format_version
from ..utils.security import SecurityAudit
from .auth import ChatAuthorizer
from .container import ContainerManager
from .menu import SelectionMenuRegistry

logger = structlog.get_logger(__name__)

SELECT_CONTAINER_PROMPT = "Select container:"
CANCELLED_MESSAGE = "Cancelled."
NO_LOGS_MESSAGE = "No logs."

CommandCallable = Callable[[int], Awaitable[Reply]]


class CommandDispatcher:
    """Maps command tokens to engine operations.

    Commands are exact, case-sensitive message texts. ``/logs`` and
    ``/restart`` open a selection menu per chat and flow; the next matching reply
    from that chat runs the action on the chosen container.
    """

    def __init__(
        self,
        authorizer: ChatAuthorizer,
        container_manager: ContainerManager,
        menus: SelectionMenuRegistry,
        bot_version: str = __version__,
    ):
        self.authorizer = authorizer
        self.container_manager = container_manager
        self.menus = menus
        self.bot_version = bot_version
        self._commands: Dict[str, CommandCallable] = {
            "/ps": self.list_containers,
            "/logs": self.open_logs_menu,
            "/restart": self.open_restart_menu,
            "/images": self.list_images,
            "/version": self.version,
        }

    @property
    def commands(self) -> tuple:
        """Command tokens in registration order."""
        return tuple(self._commands)

    async def dispatch(self, chat_id: Optional[int], text: Optional[str]) -> Optional[Reply]:
        """Authorize, then route a message to its command or open menu."""
        if text is None:
            return None
        if not self.authorizer.authorize(chat_id, text):
            return None
        handler = self._commands.get(text)
        if handler is not None:
            return await handler(chat_id)
        return await self.handle_selection(chat_id, text)

    # ------------------------------------------------------------------
    # Plain commands
    # ------------------------------------------------------------------

    async def _engine_reply(self, chat_id: int, command: str, call: Awaitable[str], target: Optional[str] = None) -> Reply:
        try:
            text = await call
        except EngineError as e:
            logger.error("Engine call failed", chat_id=chat_id, command=command, target=target, error=str(e))
            SecurityAudit.log_command(chat_id, command, target=target, success=False)
            return Reply(text=str(e))
        SecurityAudit.log_command(chat_id, command, target=target)
        return Reply(text=text)

    async def list_containers(self, chat_id: int) -> Reply:
        return await self._engine_reply(chat_id, "/ps", self.container_manager.list_containers())

    async def list_images(self, chat_id: int) -> Reply:
        return await self._engine_reply(chat_id, "/images", self.container_manager.list_images())

    async def version(self, chat_id: int) -> Reply:
        async def _version() -> str:
            engine_version = await self.container_manager.get_engine_version()
            return format_version(self.bot_version, engine_version)

        return await self._engine_reply(chat_id, "/version", _version())

    # ------------------------------------------------------------------
    # Selection menus
    # ------------------------------------------------------------------

    async def open_logs_menu(self, chat_id: int) -> Reply:
        return await self._open_menu(chat_id, FlowKind.LOGS)

    async def open_restart_menu(self, chat_id: int) -> Reply:
        return await self._open_menu(chat_id, FlowKind.RESTART)

    async def _open_menu(self, chat_id: int, kind: FlowKind) -> Reply:
        """List containers and present one button per name plus cancel.

        The menu is only registered once the listing succeeded; on failure
        the chat gets the error text and no keyboard.
        """
        command = f"/{kind.value}"
        try:
            names = await self.container_manager.list_container_names()
        except EngineError as e:
            logger.error("Could not list containers for menu", chat_id=chat_id, kind=kind.value, error=str(e))
            SecurityAudit.log_command(chat_id, command, success=False)
            return Reply(text=str(e))

        menu = self.menus.open(chat_id, kind, names)
        SecurityAudit.log_command(chat_id, command)
        return Reply(text=SELECT_CONTAINER_PROMPT, keyboard=menu.keyboard)

    async def handle_selection(self, chat_id: int, text: str) -> Optional[Reply]:
        """Answer one of the chat's open menus. Unrelated text is ignored."""
        for menu in self.menus.open_menus(chat_id):
            if menu.is_cancel(text):
                self.menus.close(chat_id, menu.kind)
                logger.info("Selection cancelled", chat_id=chat_id, kind=menu.kind.value)
                return Reply(text=CANCELLED_MESSAGE)

            container_name = menu.resolve(text)
            if container_name is not None:
                return await self._run_selection(chat_id, menu, container_name)
        return None

    async def _run_selection(self, chat_id: int, menu: PendingSelection, container_name: str) -> Reply:
        self.menus.close(chat_id, menu.kind)
        if menu.kind is FlowKind.LOGS:
            return await self._engine_reply(
                chat_id, "/logs", self._tail_logs(container_name), target=container_name
            )
        return await self._engine_reply(
            chat_id,
            "/restart",
            self.container_manager.restart_container(container_name),
            target=container_name,
        )

    async def _tail_logs(self, container_name: str) -> str:
        logs = await self.container_manager.tail_logs(container_name)
        return logs if logs.strip() else NO_LOGS_MESSAGE
