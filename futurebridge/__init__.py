"""Await blocking concurrent futures from asyncio coroutines, with demonstration programs."""

__version__ = "1.0.0"
__all__ = ["awaitable", "basic_usage", "database_example", "error_handling"]