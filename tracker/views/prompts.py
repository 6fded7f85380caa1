"""
Prompt helpers shared by every view.

Two kinds of prompt exist: free text (optionally validated inline) and a
single choice from a numbered list.
"""
from typing import Any, Callable

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from tracker.records import Choice

console = Console()

NO_MANAGER = Choice(label="None", value=None)


def ask_text(
    message: str,
    validator: Callable[[str], bool] | None = None,
    error_message: str = "Invalid value. Please try again.",
) -> str:
    """
    Asks for free text. With a validator, keeps asking the same question
    until the answer is accepted.
    """
    while True:
        answer = Prompt.ask(message, default="", show_default=False)
        if validator is None or validator(answer):
            return answer
        console.print(f"[bold red]Error:[/bold red] {error_message}")


def ask_choice(message: str, choices: list[Choice]) -> Any:
    """
    Shows the choices as a numbered list and returns the value of the one
    picked. rich re-asks until a listed number is entered.
    """
    if not choices:
        raise ValueError("ask_choice() needs at least one choice.")

    console.print(f"\n[bold yellow]{message}[/bold yellow]")
    keys = [str(index) for index in range(1, len(choices) + 1)]
    options_list = [f"  [cyan]{key}[/cyan]: {escape(choice.label)}" for key, choice in zip(keys, choices)]
    console.print("\n".join(options_list))

    key = Prompt.ask(f"Enter the number [1-{len(choices)}]", choices=keys, show_choices=False)
    return choices[int(key) - 1].value
