import asyncio

import vedro
from click.testing import CliRunner

from sitekeeper.cli import main


class Scenario(vedro.Scenario):
    subject = 'run command without environment'

    def given_runner(self):
        self.runner = CliRunner()

    async def when_user_runs_start_without_environment(self):
        self.result = await asyncio.to_thread(self.runner.invoke, main, ['start'])

    def then_it_should_exit_with_usage_code(self):
        assert self.result.exit_code == 2, self.result.output

    def and_help_should_be_printed(self):
        assert 'sitekeeper start ENVIRONMENT' in self.result.output
        assert 'docker.test' in self.result.output
