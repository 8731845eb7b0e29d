import vedro

from contexts.sites import site_config
from contexts.sites import sites_root
from sitekeeper.core.compose_interface import ComposeShellInterface
from sitekeeper.helpers.jobs_result import OperationError


class Scenario(vedro.Scenario):
    subject = 'compose command in not existing directory'

    def given_removed_project_directory(self):
        self.root = sites_root()
        self.compose = ComposeShellInterface(self.root / 'sites' / 'gone', site_config(self.root, compose_binary='true'))

    async def when_environment_is_stopped(self):
        self.result = await self.compose.dc_down()

    def then_it_should_return_operation_error(self):
        assert isinstance(self.result, OperationError)

    def and_error_should_name_directory(self):
        assert 'gone' in self.result.log
