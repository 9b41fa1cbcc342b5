"""High card CLI.

Provides the command line version of the game:
- the CLI game class and entry point
- the renderer (display logic)
- the input handler (prompts)
"""

from .cli_game import HighCardCLI, main
from .render import CLIRenderer
from .input_handler import CLIInputHandler, InputValidationError

__all__ = [
    'HighCardCLI',
    'main',
    'CLIRenderer',
    'CLIInputHandler',
    'InputValidationError'
]
