"""Typer CLI root application with serve and providers commands."""

import typer

from tn_legislators.core.config import get_settings
from tn_legislators.core.logging import setup_logging

app = typer.Typer(name="tn-legislators", help="Tennessee state legislator lookup CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir, json_logs=settings.log_json)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),  # noqa: FBT001
    host: str = typer.Option("127.0.0.1", "--host", help="Bind host"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "tn_legislators.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


@app.command()
def providers() -> None:
    """List geocoder backends and mark the configured one."""
    from tn_legislators.lib.geocoder import get_available_providers, get_geocoder

    active = get_settings().geocoder_provider
    for name in get_available_providers():
        geocoder = get_geocoder(name)
        marker = "*" if name == active else " "
        key_note = " (API key required)" if geocoder.requires_api_key else ""
        typer.echo(f"{marker} {name}{key_note}")


def _register_subcommands() -> None:
    """Register all CLI commands defined in sibling modules."""
    from tn_legislators.cli.lookup_cmd import districts, legislators, lookup

    app.command("lookup")(lookup)
    app.command("districts")(districts)
    app.command("legislators")(legislators)


_register_subcommands()
