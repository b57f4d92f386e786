"""
convert.py

CLI command to convert an RSA private key between PKCS#1 and PKCS#8.
"""
import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from rsa_keyconv.crypto.converter import convert_private_key
from rsa_keyconv.crypto.errors import KeyConversionError
from rsa_keyconv.utils.config import get_conversion_config
from rsa_keyconv.utils.keys import read_pem_text, write_pem_text

console = Console(stderr=True)


def convert_command(
    ctx: typer.Context,
    input_path: str = typer.Argument(..., help="PEM file holding the private key, or '-' for stdin."),
    input_format: Optional[str] = typer.Option(None, "--input-format", "-i", help="Format of the input key: PKCS#1 or PKCS#8."),
    output_format: Optional[str] = typer.Option(None, "--output-format", "-f", help="Format to convert to: PKCS#1 or PKCS#8."),
    out_file: Optional[str] = typer.Option(None, "--out", "-o", help="Write the converted PEM to this file instead of stdout."),
    json_output: bool = typer.Option(False, "--json", help="Print {id, output_pem} as JSON."),
):
    """
    Convert an RSA private key (e.g. from PKCS#1 to PKCS#8).
    """
    try:
        defaults = get_conversion_config((ctx.obj or {}).get("config"))
        input_pem = read_pem_text(input_path)
        result = convert_private_key(
            input_format or defaults["input_format"],
            input_pem,
            output_format or defaults["output_format"],
        )
        if out_file:
            write_pem_text(out_file, result.output_pem)
    except KeyConversionError as e:
        console.print(f"[bold red]❌ {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1)
    except FileNotFoundError as e:
        console.print(f"[bold red]❌ File not found: {escape(str(e.filename or e))}[/bold red]")
        raise typer.Exit(code=1)
    except UnicodeDecodeError:
        console.print("[bold red]❌ Input is not PEM text (binary DER input is not supported)[/bold red]")
        raise typer.Exit(code=1)
    except OSError as e:
        console.print(f"[bold red]❌ Could not access {escape(str(e.filename or input_path))}: {escape(e.strerror or str(e))}[/bold red]")
        raise typer.Exit(code=1)

    if out_file:
        console.print(f"[green]✅ Converted key written to:[/] [yellow]{out_file}[/yellow]")

    if json_output:
        typer.echo(json.dumps(result.as_dict(), indent=2))
    elif not out_file:
        typer.echo(result.output_pem, nl=False)

    console.print(f"id: [bold white]{result.id}[/bold white]")
