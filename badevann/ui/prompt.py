"""Line-based terminal prompts with an escape route back to the menu."""

from collections.abc import Callable

# Typed at any prompt to go back, like pressing escape
INTERRUPT_WORDS = frozenset({"esc", "q"})


class TerminalPrompter:
    """Numbered-choice and free-text prompts.

    Both prompts return None when the user interrupts: ``esc``/``q``,
    Ctrl-C or end of input.
    """

    def __init__(self, input_fn: Callable[[str], str] = input):
        self.input_fn = input_fn

    def ask(self, message: str) -> str | None:
        try:
            answer = self.input_fn(f"{message}: ")
        except (EOFError, KeyboardInterrupt):
            print()
            return None
        answer = answer.strip()
        if answer.lower() in INTERRUPT_WORDS:
            return None
        return answer

    def choose(self, message: str, labels: list[str]) -> int | None:
        """Show a numbered list and return the 0-based index picked."""
        print(f"\n{message}")
        for i, label in enumerate(labels, 1):
            print(f"  {i:>3}. {label}")

        while True:
            answer = self.ask(f"Velg 1-{len(labels)} (esc for å gå tilbake)")
            if answer is None:
                return None
            if answer.isdigit() and 1 <= int(answer) <= len(labels):
                return int(answer) - 1
            if answer:
                print(f"  Ugyldig valg: {answer}")
