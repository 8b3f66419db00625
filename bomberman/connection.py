"""A connected player's end of the wire."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

log = logging.getLogger(__name__)


@dataclass(eq=False)
class Client:
    """A player connection; the writer needs write(bytes) and close()."""

    id: str
    writer: Any
    addr: str = ""
    closed: bool = field(default=False, init=False)

    def send(self, message: str) -> None:
        """Write a message; failures on a dead link are ignored."""
        if self.closed:
            return
        try:
            self.writer.write(message.encode("utf-8"))
        except (OSError, RuntimeError):
            pass

    def disconnect(self) -> None:
        """Tell the client it is being dropped and close the connection."""
        if self.closed:
            return
        log.info("Disconnecting client %s", self.id)
        self.send("You have been disconnected.\n")
        self.closed = True
        try:
            self.writer.close()
        except (OSError, RuntimeError):
            pass