"""Command-line parsing and dispatch."""

from .dispatcher import CommandDispatcher, DispatchResult
from .parser import Command, parse_command

__all__ = ["Command", "CommandDispatcher", "DispatchResult", "parse_command"]
