"""Command that runs a manager and a demo executor against each other."""

from __future__ import annotations

import argparse
import asyncio
import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Sequence

from board_game.game_executor import GameExecutor
from board_game.game_manager import GameManager
from board_game.messages import ExecutorToManagerRequest, ExecutorToManagerResponse

logger = logging.getLogger(__name__)

CHANNEL_CAPACITY = 32
DEFAULT_DELAY = 2.0
DEFAULT_LOG_DIR = "./log"
LOG_FILE_NAME = "game.log"


class DemoGameExecutor(GameExecutor):
    """An executor that initialises, waits ``delay`` seconds and asks to quit."""

    def __init__(
        self,
        inbox: Optional[asyncio.Queue] = None,
        outbox: Optional[asyncio.Queue] = None,
        delay: float = DEFAULT_DELAY,
    ) -> None:
        super().__init__(inbox, outbox)
        self.delay = delay

    async def draw_opening_screen(self) -> None:
        """Nothing is drawn."""

    async def init_game(self) -> None:
        logger.debug("init game")
        await self._send(ExecutorToManagerResponse.INIT_GAME)

    async def quit_game(self) -> None:
        logger.debug("execute quiting game")
        await self._send(ExecutorToManagerResponse.QUIT_GAME)

    async def execute_game(self) -> None:
        await asyncio.sleep(self.delay)
        await self._send(ExecutorToManagerRequest.READY_TO_QUIT_GAME)


def configure_logging(directory: str | Path = DEFAULT_LOG_DIR) -> logging.Handler:
    """Send the package's log to a daily-rotated file in ``directory``.

    Returns the handler so the caller can detach and close it.
    """
    path = Path(directory)
    path.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.TimedRotatingFileHandler(
        path / LOG_FILE_NAME, when="midnight", encoding="utf-8"
    )
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(pathname)s:%(lineno)d %(message)s"
        )
    )
    package_logger = logging.getLogger("board_game")
    package_logger.setLevel(logging.DEBUG)
    package_logger.addHandler(handler)
    return handler


async def run_game(delay: float = DEFAULT_DELAY) -> None:
    """Run one game between a manager and a demo executor."""
    to_executor: asyncio.Queue = asyncio.Queue(maxsize=CHANNEL_CAPACITY)
    to_manager: asyncio.Queue = asyncio.Queue(maxsize=CHANNEL_CAPACITY)

    manager = GameManager(inbox=to_manager, outbox=to_executor)
    executor = DemoGameExecutor(inbox=to_executor, outbox=to_manager, delay=delay)

    async def drive_manager() -> None:
        try:
            await manager.start()
        finally:
            # The manager is done with its channel: close it for the executor.
            await to_executor.put(None)

    await asyncio.gather(executor.run(), drive_manager())


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="board_game", description="Run a game.")
    parser.add_argument(
        "--log-dir", default=DEFAULT_LOG_DIR, help="directory for the log file"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_DELAY,
        help="seconds the game runs before asking to quit",
    )
    args = parser.parse_args(argv)

    handler = configure_logging(args.log_dir)
    try:
        asyncio.run(run_game(args.delay))
    finally:
        logging.getLogger("board_game").removeHandler(handler)
        handler.close()
    return 0