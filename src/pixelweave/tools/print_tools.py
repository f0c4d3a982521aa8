from rich.console import Console

"""
Shared rich consoles for CLI output
"""

console = Console()
error_console = Console(stderr=True)

# Help output stays readable on wide terminals
help_console = Console(width=min(80, console.width))
