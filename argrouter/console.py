# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argrouter CLI applications."""
from rich.console import Console

from argrouter.themes import get_theme

console = Console(theme=get_theme(), highlight=False)
