"""keyforge CLI application using Typer.

Provides key generation for deployment configuration and a command to
run the HTTP API.
"""

import typer
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from rich.console import Console

app = typer.Typer(
    name="keyforge",
    help="keyforge - credential provider CLI",
    no_args_is_help=True,
)
console = Console()


keys_app = typer.Typer(
    name="keys",
    help="Signing key utilities",
    no_args_is_help=True,
)
app.add_typer(keys_app)


def generate_private_key_pem() -> str:
    """Generate a fresh ECDSA P-521 private key as PKCS#8 PEM."""
    private_key = ec.generate_private_key(ec.SECP521R1())
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@keys_app.command("generate")
def generate_keys(
    env: bool = typer.Option(
        False,
        "--env",
        help="Print a single JWT_PRIVATE_KEY= line for .env files",
    ),
) -> None:
    """Generate an ES512 signing key for keyforge configuration.

    Copy the output to the JWT_PRIVATE_KEY setting.
    """
    pem = generate_private_key_pem()

    if env:
        escaped = pem.strip().replace("\n", "\\n")
        console.print(f'JWT_PRIVATE_KEY="{escaped}"', markup=False, soft_wrap=True)
        return

    console.print("\n[bold green]keyforge Key Generation[/bold green]")
    console.print("=" * 60)
    console.print(pem, markup=False)
    console.print("=" * 60)
    console.print(
        "[yellow]Keep this key secure and never commit it "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Run with --env to get a line for config/.env.[/dim]\n"
    )


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default from settings)"),
    port: int | None = typer.Option(None, help="Bind port (default from settings)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the keyforge HTTP API with uvicorn."""
    import uvicorn

    from keyforge_config.settings import get_settings

    settings = get_settings()
    uvicorn.run(
        "keyforge.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
