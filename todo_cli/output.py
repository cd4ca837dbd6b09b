"""Shared rich consoles: results on stdout, errors and diagnostics on stderr."""

from rich.console import Console

# Todo text itself is printed with click.echo; no markup, emoji, highlighting or wrapping here
console = Console(soft_wrap=True, emoji=False, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, emoji=False, highlight=False)


def debug(message: str, verbose: bool) -> None:
    if verbose:
        err_console.print(f"[dim]{message}[/dim]")
