"""Notifier Protocol — delivers a rendered assignment to one recipient."""

from typing import Protocol


class Notifier(Protocol):
    """Sends one message with one attachment; raises a QAllocError on failure."""

    async def send(
        self,
        recipient: str,
        subject: str,
        body: str,
        attachment_name: str,
        document: bytes,
    ) -> None: ...
