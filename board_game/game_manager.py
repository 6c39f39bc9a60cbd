"""The manager side of the game: drives the executor through a game's life."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from board_game.board import PLAYER_NUM, Board, Player
from board_game.messages import (
    ExecutorToManagerRequest,
    ExecutorToManagerResponse,
    ManagerToExecutorMessage,
)
from board_game.messages import ManagerToExecutorRequest

logger = logging.getLogger(__name__)


class GameManagerError(Exception):
    """Raised when the manager cannot reach its channels or reads a bad message."""


class GameManager:
    """Owns the board and players and tells the executor what to do.

    ``inbox`` carries messages from the executor; ``outbox`` carries
    messages to it. Putting ``None`` into the inbox closes it.
    """

    def __init__(
        self,
        inbox: Optional[asyncio.Queue] = None,
        outbox: Optional[asyncio.Queue] = None,
    ) -> None:
        self.board = Board()
        self.players = [Player() for _ in range(PLAYER_NUM)]
        self.inbox = inbox
        self.outbox = outbox

    def _require_inbox(self) -> asyncio.Queue:
        if self.inbox is None:
            raise GameManagerError("Channel error")
        return self.inbox

    def _require_outbox(self) -> asyncio.Queue:
        if self.outbox is None:
            raise GameManagerError("Channel error")
        return self.outbox

    async def _send(self, message: ManagerToExecutorMessage) -> None:
        await self._require_outbox().put(message)

    async def start(self) -> None:
        """Ask the executor to start a game and react until it has quit."""
        outbox = self._require_outbox()
        inbox = self._require_inbox()
        await outbox.put(ManagerToExecutorRequest.INIT_GAME)
        while (message := await inbox.get()) is not None:
            match message:
                case ExecutorToManagerRequest.READY_TO_QUIT_GAME:
                    await self.ready_to_quit_game()
                case ExecutorToManagerResponse.INIT_GAME:
                    await self.process_init_game_response()
                case ExecutorToManagerResponse.QUIT_GAME:
                    logger.debug("quit game")
                    break
                case ExecutorToManagerResponse.EXECUTE_GAME:
                    await self.process_execute_game_response()
                case _:
                    raise GameManagerError("Message error")

    async def ready_to_quit_game(self) -> None:
        """Tell the executor to quit."""
        logger.debug("ready to quit game")
        await self._send(ManagerToExecutorRequest.QUIT_GAME)

    async def process_init_game_response(self) -> None:
        """Once the game is initialised, tell the executor to run it."""
        logger.debug("execute the game")
        await self._send(ManagerToExecutorRequest.EXECUTE_GAME)

    async def process_execute_game_response(self) -> None:
        """React to the executor having run the game; nothing to do yet."""