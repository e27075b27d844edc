# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for the argmatch command line."""
from rich.console import Console

console = Console()
