"""
Command Pipeline Module.

Orchestrates parse -> resolve -> apply for one command.
"""

from .executor import CommandExecutor, execute_command, quick_execute
