"""輸入控制模組"""

from .commands import Command, commands_from_keys, command_from_pointer

__all__ = ['Command', 'commands_from_keys', 'command_from_pointer']
