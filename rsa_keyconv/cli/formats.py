"""CLI command listing the supported key formats."""

from rich.console import Console
from rich.table import Table

from rsa_keyconv.crypto.formats import KeyFormat

console = Console()


def formats_command():
    """
    List the supported private key formats.
    """
    table = Table(title="Supported Formats")
    table.add_column("Format", style="cyan")
    table.add_column("PEM Label", style="green")
    table.add_column("Description")

    for fmt in KeyFormat:
        table.add_row(fmt.value, f"-----BEGIN {fmt.pem_label}-----", fmt.description)

    console.print(table)
