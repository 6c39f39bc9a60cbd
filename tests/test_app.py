import asyncio
import logging

import pytest

from board_game.app import DemoGameExecutor, configure_logging, main, run_game
from board_game.messages import (
    ExecutorToManagerRequest,
    ExecutorToManagerResponse,
    ManagerToExecutorRequest,
)


def _drain(queue):
    items = []
    while not queue.empty():
        items.append(queue.get_nowait())
    return items


@pytest.mark.asyncio
async def test_init_game_sends_init_response():
    outbox = asyncio.Queue()
    executor = DemoGameExecutor(asyncio.Queue(), outbox, 0)
    await executor.init_game()
    assert _drain(outbox) == [ExecutorToManagerResponse.INIT_GAME]


@pytest.mark.asyncio
async def test_quit_game_sends_quit_response():
    outbox = asyncio.Queue()
    executor = DemoGameExecutor(asyncio.Queue(), outbox, 0)
    await executor.quit_game()
    assert _drain(outbox) == [ExecutorToManagerResponse.QUIT_GAME]


@pytest.mark.asyncio
async def test_execute_game_asks_to_quit():
    outbox = asyncio.Queue()
    executor = DemoGameExecutor(asyncio.Queue(), outbox, 0)
    await executor.execute_game()
    assert _drain(outbox) == [ExecutorToManagerRequest.READY_TO_QUIT_GAME]


@pytest.mark.asyncio
async def test_demo_executor_runs_full_sequence():
    inbox, outbox = asyncio.Queue(), asyncio.Queue()
    for message in (
        ManagerToExecutorRequest.INIT_GAME,
        ManagerToExecutorRequest.EXECUTE_GAME,
        ManagerToExecutorRequest.QUIT_GAME,
        None,
    ):
        await inbox.put(message)
    executor = DemoGameExecutor(inbox, outbox, 0)
    await asyncio.wait_for(executor.run(), 1)
    assert _drain(outbox) == [
        ExecutorToManagerResponse.INIT_GAME,
        ExecutorToManagerRequest.READY_TO_QUIT_GAME,
        ExecutorToManagerResponse.QUIT_GAME,
    ]


@pytest.mark.asyncio
async def test_run_game_completes(caplog):
    with caplog.at_level(logging.DEBUG, logger="board_game"):
        await asyncio.wait_for(run_game(0), 2)
    messages = [record.getMessage() for record in caplog.records]
    assert messages.index("init game") < messages.index("quit game")
    assert "execute quiting game" in messages


def test_configure_logging_creates_file(tmp_path):
    directory = tmp_path / "logs"
    handler = configure_logging(directory)
    try:
        logging.getLogger("board_game.test").debug("hello log")
    finally:
        logging.getLogger("board_game").removeHandler(handler)
        handler.close()
    assert "hello log" in (directory / "game.log").read_text(encoding="utf-8")


def test_main_runs_game_and_logs(tmp_path):
    assert main(["--log-dir", str(tmp_path), "--delay", "0"]) == 0
    text = (tmp_path / "game.log").read_text(encoding="utf-8")
    assert "ready to quit game" in text
    assert "quit game" in text