"""Splitting long replies into Telegram-sized messages."""

from typing import List

from telegram.constants import MessageLimit

TELEGRAM_MAX_MESSAGE_LENGTH = MessageLimit.MAX_TEXT_LENGTH


def split_message(text: str, max_len: int = TELEGRAM_MAX_MESSAGE_LENGTH) -> List[str]:
    """Split text into chunks no longer than ``max_len``.

    Cuts prefer the last newline, then the last space, inside the limit;
    a line with neither is cut hard. Whitespace-only chunks are dropped
    because Telegram rejects empty messages.
    """
    if max_len <= 0:
        raise ValueError("max_len must be positive")
    if not text:
        return []

    chunks = []
    remaining = text
    while len(remaining) > max_len:
        cut = remaining.rfind("\n", 0, max_len + 1)
        if cut <= 0:
            cut = remaining.rfind(" ", 0, max_len + 1)
        if cut <= 0:
            cut = max_len
        chunk = remaining[:cut]
        if chunk.strip():
            chunks.append(chunk)
        remaining = remaining[cut:].lstrip("\n")
    if remaining.strip():
        chunks.append(remaining)
    return chunks
