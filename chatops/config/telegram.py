"""Telegram bot configuration."""

from typing import Annotated, Any, Iterable

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode


def parse_chat_ids(value: Any) -> frozenset[int]:
    """Parse a comma-separated allow-list of chat ids.

    Blank entries are skipped; any other entry that is not an integer
    raises ``ValueError`` so a typo never silently locks operators out.
    """
    if value is None:
        return frozenset()
    if isinstance(value, int):
        return frozenset({value})
    if isinstance(value, str):
        parts: Iterable[Any] = value.split(",")
    else:
        parts = value

    chat_ids = set()
    for part in parts:
        if isinstance(part, str):
            part = part.strip()
            if not part:
                continue
        try:
            chat_ids.add(int(part))
        except (TypeError, ValueError):
            raise ValueError(f"Invalid chat id in allow-list: {part!r}")
    return frozenset(chat_ids)


class TelegramConfig(BaseSettings):
    """Telegram bot settings."""

    bot_token: str = Field(default="", alias="telegram_bot_token")
    allowed_chat_ids: Annotated[frozenset[int], NoDecode] = Field(default_factory=frozenset)
    announce_startup: bool = Field(default=True)
    menu_ttl_seconds: int = Field(default=300, ge=10, le=86400)

    class Config:
        env_prefix = ""
        extra = "ignore"

    @field_validator("allowed_chat_ids", mode="before")
    @classmethod
    def _parse_allowed_chat_ids(cls, v):
        return parse_chat_ids(v)
