"""
modelwarp CLI module - shared console and commands.
"""
from modelwarp.cli.console import console, custom_theme
from modelwarp.cli.helpers import check_sheet, get_settings, run_guess
from modelwarp.cli.guess import guess_command, display_guess_table
from modelwarp.cli.describe import describe_command, ask_column_type

__all__ = [
    'console',
    'custom_theme',
    'check_sheet',
    'get_settings',
    'run_guess',
    'guess_command',
    'display_guess_table',
    'describe_command',
    'ask_column_type',
]
