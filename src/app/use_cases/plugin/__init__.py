"""Use cases do plugin `/query`."""

from .run import QueryCommand, parse_query_command, run

__all__ = [
    "QueryCommand",
    "parse_query_command",
    "run",
]
