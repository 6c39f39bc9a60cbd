"""Messages exchanged between the game manager and the game executor."""

from __future__ import annotations

from enum import Enum, auto
from typing import Union


class ManagerToExecutorRequest(Enum):
    """Requests the manager sends to the executor."""

    INIT_GAME = auto()
    QUIT_GAME = auto()
    EXECUTE_GAME = auto()


class ManagerToExecutorResponse(Enum):
    """Responses the manager sends to the executor."""

    READY_TO_QUIT_GAME = auto()


class ExecutorToManagerRequest(Enum):
    """Requests the executor sends to the manager."""

    READY_TO_QUIT_GAME = auto()


class ExecutorToManagerResponse(Enum):
    """Responses the executor sends to the manager."""

    INIT_GAME = auto()
    QUIT_GAME = auto()
    EXECUTE_GAME = auto()


ManagerToExecutorMessage = Union[ManagerToExecutorRequest, ManagerToExecutorResponse]
ExecutorToManagerMessage = Union[ExecutorToManagerRequest, ExecutorToManagerResponse]