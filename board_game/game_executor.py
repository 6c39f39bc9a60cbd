"""The executor side of the game: reacts to requests sent by the manager."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Optional

from board_game.messages import (
    ExecutorToManagerMessage,
    ManagerToExecutorMessage,
    ManagerToExecutorRequest,
    ManagerToExecutorResponse,
)

# A ``None`` placed in a queue marks the channel as closed.
Inbox = "asyncio.Queue[Optional[ManagerToExecutorMessage]]"
Outbox = "asyncio.Queue[Optional[ExecutorToManagerMessage]]"


class GameExecutorError(Exception):
    """Raised when the executor cannot reach its channels or reads a bad message."""


class GameExecutor(ABC):
    """Receives manager messages and dispatches them to the game hooks.

    ``inbox`` carries messages from the manager and ``outbox`` carries
    messages back to it. Putting ``None`` into the inbox closes it and ends
    :meth:`run`.
    """

    def __init__(
        self,
        inbox: Optional[asyncio.Queue] = None,
        outbox: Optional[asyncio.Queue] = None,
    ) -> None:
        self.inbox = inbox
        self.outbox = outbox

    def _require_inbox(self) -> asyncio.Queue:
        if self.inbox is None:
            raise GameExecutorError("Get rx error")
        return self.inbox

    def _require_outbox(self) -> asyncio.Queue:
        if self.outbox is None:
            raise GameExecutorError("Get tx error")
        return self.outbox

    async def _send(self, message: ExecutorToManagerMessage) -> None:
        await self._require_outbox().put(message)

    async def run(self) -> None:
        """Handle incoming messages until the inbox is closed."""
        inbox = self._require_inbox()
        while (message := await inbox.get()) is not None:
            match message:
                case ManagerToExecutorRequest.INIT_GAME:
                    await self.init_game()
                case ManagerToExecutorRequest.QUIT_GAME:
                    await self.quit_game()
                case ManagerToExecutorRequest.EXECUTE_GAME:
                    await self.execute_game()
                case ManagerToExecutorResponse.READY_TO_QUIT_GAME:
                    pass
                case _:
                    raise GameExecutorError("Message error")

    @abstractmethod
    async def draw_opening_screen(self) -> None:
        """Draw the screen shown before the game starts."""

    @abstractmethod
    async def init_game(self) -> None:
        """Prepare a new game."""

    @abstractmethod
    async def quit_game(self) -> None:
        """Shut the game down."""

    @abstractmethod
    async def execute_game(self) -> None:
        """Play the game."""