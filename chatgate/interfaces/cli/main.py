"""
CLI Main - Typer-based command-line interface.

Usage:
    chatgate serve
    chatgate console
    chatgate ask "What is the capital of Korea?" --provider gemini
    chatgate version
"""

from __future__ import annotations

import asyncio
import logging

import typer
from rich.console import Console
from rich.markup import escape

from .client import GatewayClient, Provider
from .console import ChatConsole

app = typer.Typer(
    name="chatgate",
    help="ChatGate - OpenAI / Gemini question gateway",
    add_completion=False,
)
console = Console()


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Host to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to bind"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
) -> None:
    """Start the gateway server."""
    import uvicorn

    from chatgate.config import get_settings

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    console.print("\n[green]Starting ChatGate API server[/green]")
    console.print(f"[dim]http://{host}:{port}[/dim]\n")

    uvicorn.run(
        "chatgate.interfaces.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


@app.command(name="console")
def console_command(
    url: str | None = typer.Option(None, "--url", "-u", help="Gateway base URL"),
) -> None:
    """Open the interactive test console."""
    try:
        asyncio.run(_console_async(url))
    except KeyboardInterrupt:
        console.print("\nExiting.")


async def _console_async(url: str | None) -> None:
    """Async console implementation."""
    from chatgate.config import get_settings

    settings = get_settings()
    async with GatewayClient(
        base_url=url or settings.gateway_url,
        timeout=settings.gateway_timeout_seconds,
    ) as client:
        await ChatConsole(client, console=console).run()


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to send"),
    provider: Provider = typer.Option(Provider.OPENAI, "--provider", "-p", help="Provider route"),
    url: str | None = typer.Option(None, "--url", "-u", help="Gateway base URL"),
) -> None:
    """Send one question through the gateway."""
    if not question.strip():
        console.print("[red]Error:[/red] Question is required")
        raise typer.Exit(1)

    asyncio.run(_ask_async(question, provider, url))


async def _ask_async(question: str, provider: Provider, url: str | None) -> None:
    """Async ask implementation."""
    from chatgate.config import get_settings

    settings = get_settings()
    async with GatewayClient(
        base_url=url or settings.gateway_url,
        timeout=settings.gateway_timeout_seconds,
    ) as client:
        envelope = await client.ask(provider, question)

    if not envelope.success:
        console.print(f"[red]Error:[/red] {escape(envelope.error or '')}")
        raise typer.Exit(1)

    console.print(f"[bold cyan]{provider.label}:[/bold cyan] {escape(envelope.answer)}")


@app.command()
def version() -> None:
    """Show version information."""
    from chatgate import __version__

    console.print(f"ChatGate v{__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
