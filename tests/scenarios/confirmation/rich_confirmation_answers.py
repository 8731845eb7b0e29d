import io

import vedro
from rich.console import Console

from sitekeeper.core.confirmation import RichConfirmation


class Scenario(vedro.Scenario):
    subject = 'answer yes/no confirmation prompt'

    def given_typed_answers(self):
        self.answers = {
            'Y\n': True,
            'y\n': True,
            'N\n': False,
            'n\n': False,
            '\n': False,
            '': False,
            'yes\nmaybe\nY\n': True,
            'nope\nn\n': False,
        }
        self.output = io.StringIO()

    def when_user_answers(self):
        self.confirmed = {
            typed: RichConfirmation(console=Console(file=self.output), stream=io.StringIO(typed)).ask('Delete?')
            for typed in self.answers
        }

    def then_only_explicit_yes_should_confirm(self):
        assert self.confirmed == self.answers

    def and_invalid_answers_should_be_reprompted(self):
        assert 'You must choose either `Y` or `n`' in self.output.getvalue()
