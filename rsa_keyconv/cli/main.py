import typer
from typing import Optional
from rsa_keyconv import __version__
from rsa_keyconv.cli.convert import convert_command
from rsa_keyconv.cli.fingerprint import fingerprint_command
from rsa_keyconv.cli.formats import formats_command
from rsa_keyconv.utils.config import get_log_level
from rsa_keyconv.utils.logger import set_level

app = typer.Typer(help="rsa-keyconv CLI: convert RSA private keys between PKCS#1 and PKCS#8.")

app.command("convert")(convert_command)
app.command("fingerprint")(fingerprint_command)
app.command("formats")(formats_command)


def _version_callback(value: bool):
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def root(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(None, "--config", "-c", envvar="RSA_KEYCONV_CONFIG", help="Path to a YAML config file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
):
    """Convert RSA private keys between PKCS#1 and PKCS#8 PEM."""
    ctx.obj = {"config": config}
    try:
        set_level("DEBUG" if verbose else get_log_level(config))
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=1)


def main():
    app()

if __name__ == "__main__":
    main()
