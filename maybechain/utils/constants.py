"""
Centralized UI constants for consistent styling across maybechain.

Symbols and styles used by the Rich sink and the CLI tables.
"""

# Colorblind-friendly symbols and styles
SYMBOLS = {
    "chain": "⛓️ ",
    "success": "[bold green]✓[/bold green] ",
    "error": "[bold red]![/bold red] ",
    "step": "→ ",
    "result": "[bold blue]=[/bold blue] ",
}

STYLE = {
    "header": "bold cyan",
    "dim": "dim",
    "error": "red",
    "success": "green",
    "step_id": "cyan",
    "value": "magenta",
}
