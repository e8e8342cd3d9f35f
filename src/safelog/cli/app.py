"""Typer CLI root application with serve command."""

import typer

from safelog.core.config import get_settings
from safelog.core.logging import setup_logging

app = typer.Typer(name="safelog", help="Sensitive data classification and log redaction CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir, serialize=settings.log_serialize)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("127.0.0.1", "--host", help="Bind host"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "safelog.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommands."""
    from safelog.cli.classify_cmd import classifications, redact

    app.command("classifications")(classifications)
    app.command("redact")(redact)


_register_subcommands()
