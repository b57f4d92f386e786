"""CLI command to print the identifier of a PEM document."""

import typer
from rich.console import Console
from rich.markup import escape

from rsa_keyconv.utils.keys import fingerprint_from_file

console = Console(stderr=True)


def fingerprint_command(
    input_path: str = typer.Argument(..., help="PEM file to fingerprint, or '-' for stdin."),
):
    """
    Print the SHA-256 id of a PEM document (the same id `convert` reports).
    """
    try:
        typer.echo(fingerprint_from_file(input_path))
    except FileNotFoundError as e:
        console.print(f"[bold red]❌ File not found: {escape(str(e.filename or e))}[/bold red]")
        raise typer.Exit(code=1)
    except UnicodeDecodeError:
        console.print("[bold red]❌ Input is not PEM text (binary DER input is not supported)[/bold red]")
        raise typer.Exit(code=1)
    except OSError as e:
        console.print(f"[bold red]❌ Could not access {escape(str(e.filename or input_path))}: {escape(e.strerror or str(e))}[/bold red]")
        raise typer.Exit(code=1)
