from typing import IO
from typing import Protocol

from rich.console import Console
from rich.prompt import Prompt

from sitekeeper.output.console import CONSOLE

YES_ANSWERS = ('Y', 'y')
ANSWERS = ['Y', 'y', 'N', 'n']


class YesNoPrompt(Prompt):
    illegal_choice_message = "[prompt.invalid.choice]You must choose either `Y` or `n`"


class Confirmation(Protocol):
    def ask(self, question: str) -> bool:
        ...


class RichConfirmation:
    def __init__(self, console: Console = CONSOLE, stream: IO[str] | None = None):
        self._console = console
        self._stream = stream

    def ask(self, question: str) -> bool:
        try:
            answer = YesNoPrompt.ask(
                question,
                console=self._console,
                choices=ANSWERS,
                default='n',
                stream=self._stream,
            )
        except (KeyboardInterrupt, EOFError):
            self._console.print()
            return False

        return answer in YES_ANSWERS


class AlwaysConfirm:
    def ask(self, question: str) -> bool:
        return True
