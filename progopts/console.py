# progopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for progopts host output."""
from rich.console import Console

error_console = Console(color_system="truecolor", stderr=True)
