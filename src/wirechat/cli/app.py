"""CLI main module for wirechat."""

from __future__ import annotations

from typing import Annotated, NoReturn, Optional

import typer
from loguru import logger
from pydantic import ValidationError

from wirechat.config import DEFAULT_PORT, Settings, get_settings, resolve_port
from wirechat.errors import ConfigurationError, SessionCancelled, TransportError
from wirechat.logging_utils import configure_logging
from wirechat.net.connector import connect

from .render import Renderer, create_cli_renderer
from .session import SIGNAL_MESSAGE, Session, run_session, send_once, signal_cancellation

app = typer.Typer(
    name="wirechat",
    help="Line-oriented TCP chat client.",
    add_completion=False,
    rich_markup_mode="rich",
)

LogLevelOption = Annotated[Optional[str], typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)")]


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        # Default to chat mode
        chat()


def _load_settings(host: Optional[str], port: Optional[int], log_level: Optional[str]) -> Settings:
    try:
        settings = get_settings(host=host, log_level=log_level)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in error["loc"]) for error in exc.errors())
        raise ConfigurationError(f"Invalid settings: {fields or exc}") from exc
    configure_logging(level=settings.log_level, profile="chat")

    requested = port if port is not None else settings.port
    resolved = resolve_port(requested, DEFAULT_PORT)
    if resolved != requested:
        logger.warning("cli.invalid_port port={} fallback={}", requested, resolved)
    return settings.model_copy(update={"port": resolved})


def _open_session(settings: Settings, renderer: Renderer) -> Session:
    return Session(settings=settings, renderer=renderer, connector=connect)


def _exit_with_error(renderer: Renderer, message: str, exc: Exception) -> NoReturn:
    """Report a fatal error and exit with error code."""
    renderer.error(message)
    raise typer.Exit(1) from exc


@app.command()
def chat(
    host: Annotated[Optional[str], typer.Argument(help="Server host")] = None,
    port: Annotated[Optional[int], typer.Argument(help="Server port")] = None,
    log_level: LogLevelOption = None,
) -> None:
    """Start an interactive session with the server."""
    renderer = create_cli_renderer()
    try:
        settings = _load_settings(host, port, log_level)
    except ConfigurationError as exc:
        _exit_with_error(renderer, str(exc), exc)
    session = _open_session(settings, renderer)

    # Exchange failures are reported inside the loop; only connecting raises here.
    try:
        with session, signal_cancellation(session):
            run_session(session)
    except SessionCancelled:
        renderer.info(SIGNAL_MESSAGE)
    except TransportError as exc:
        logger.warning("cli.connect_failed peer={} error={}", session.peer, exc)
        _exit_with_error(renderer, f"Failed to connect to server: {exc}", exc)


@app.command()
def send(
    message: Annotated[str, typer.Argument(help="Message to send")],
    host: Annotated[Optional[str], typer.Option("--host", "-H", help="Server host")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Server port")] = None,
    log_level: LogLevelOption = None,
) -> None:
    """Send one message, render the reply and exit."""
    renderer = create_cli_renderer()
    try:
        settings = _load_settings(host, port, log_level)
    except ConfigurationError as exc:
        _exit_with_error(renderer, str(exc), exc)
    session = _open_session(settings, renderer)

    try:
        with session:
            send_once(session, message)
    except TransportError as exc:
        logger.warning("cli.send_failed peer={} error={}", session.peer, exc)
        _exit_with_error(renderer, str(exc), exc)


if __name__ == "__main__":
    app()
