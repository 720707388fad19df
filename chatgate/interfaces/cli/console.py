"""
Chat Console - Interactive menu for exercising the gateway.

Menu:
    1. ChatGPT single question
    2. Gemini single question
    3. ChatGPT conversation
    4. Gemini conversation
    5. Exit

Blank input never reaches the network. Conversations end on "quit" or
"exit" (any case). End of input leaves both the conversation and the menu.
"""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from chatgate.domains.chat import ResponseEnvelope, is_blank

from .client import GatewayClient, Provider

EXIT_WORDS = frozenset({"quit", "exit"})

MENU = (
    "[bold]=== ChatGate Test Console ===[/bold]\n"
    "1. ChatGPT API test\n"
    "2. Gemini API test\n"
    "3. Interactive chat (ChatGPT)\n"
    "4. Interactive chat (Gemini)\n"
    "5. Exit"
)


class ChatConsole:
    """
    Menu-driven console over a GatewayClient.

    Example:
        >>> async with GatewayClient() as client:
        ...     await ChatConsole(client).run()
    """

    def __init__(
        self,
        client: GatewayClient,
        console: Console | None = None,
        read_line: Callable[[str], str] | None = None,
    ) -> None:
        self.client = client
        self.console = console or Console()
        self._read_line = read_line or self.console.input

    def _read(self, prompt: str) -> str | None:
        """Read one line; None on end of input."""
        try:
            return self._read_line(prompt)
        except EOFError:
            return None

    async def run(self) -> None:
        """Show the menu until the user exits."""
        self.console.print(MENU)
        self.console.print()

        actions = {
            "1": lambda: self.single_shot(Provider.OPENAI),
            "2": lambda: self.single_shot(Provider.GEMINI),
            "3": lambda: self.interactive(Provider.OPENAI),
            "4": lambda: self.interactive(Provider.GEMINI),
        }

        while True:
            choice = self._read("Select (1-5): ")
            if choice is None or choice.strip() == "5":
                self.console.print("Exiting.")
                return

            action = actions.get(choice.strip())
            if action is None:
                self.console.print("[red]Invalid choice.[/red] Please try again.")
            elif not await action():
                self.console.print("Exiting.")
                return

            self.console.print()

    async def single_shot(self, provider: Provider) -> bool:
        """
        Ask one question.

        Returns:
            False when input ended, True otherwise
        """
        self.console.print(f"\n[bold]=== {provider.label} API test ===[/bold]")
        question = self._read("Enter your question: ")
        if question is None:
            return False
        if is_blank(question):
            self.console.print("[yellow]Please enter a question.[/yellow]")
            return True

        self.console.print(f"[dim]Asking {provider.label}...[/dim]")
        envelope = await self.client.ask(provider, question)
        self._show(envelope, answer_label="\nAnswer", error_label="\nError")
        return True

    async def interactive(self, provider: Provider) -> bool:
        """
        Converse until "quit"/"exit".

        Each line is an independent question; no history is sent.

        Returns:
            False when input ended, True otherwise
        """
        label = provider.label
        self.console.print(f"\n[bold]=== {label} interactive test ===[/bold]")
        self.console.print("Type 'quit' or 'exit' to end the conversation.\n")

        while True:
            line = self._read("You: ")
            if line is None:
                return False
            if is_blank(line):
                continue
            if line.strip().lower() in EXIT_WORDS:
                self.console.print("Conversation ended.")
                return True

            self.console.print(f"[dim]{label}: generating answer...[/dim]")
            envelope = await self.client.ask(provider, line)
            self._show(envelope, answer_label=label, error_label=f"{label} error")
            self.console.print()

    def _show(self, envelope: ResponseEnvelope, answer_label: str, error_label: str) -> None:
        if envelope.success:
            self.console.print(f"[green]{answer_label}:[/green] {escape(envelope.answer)}")
        else:
            self.console.print(f"[red]{error_label}:[/red] {escape(envelope.error or '')}")
