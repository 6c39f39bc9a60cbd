"""Board-game skeleton: board model, ANSI terminal helpers and an asyncio manager/executor loop."""

__version__ = "0.1.0"
__all__ = ["board", "messages", "printer", "game_executor", "game_manager", "app"]