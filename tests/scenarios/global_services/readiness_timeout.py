import vedro

from config import Config
from contexts.global_services import global_controller
from contexts.sites import sites_root
from helpers.fakes import Journal
from sitekeeper.errors import ReadinessTimeout


class Scenario(vedro.Scenario):
    subject = 'database never reports readiness'

    def given_crashed_database(self):
        self.journal = Journal()
        self.controller = global_controller(
            sites_root(), self.journal, network_exists=True, wait=True,
            logs=[b'mysql_1  | [ERROR] InnoDB: Cannot allocate memory\nmysql_1 exited with code 1\n'],
        )

    async def when_gateway_started(self):
        try:
            await self.controller.start_gateway()
        except ReadinessTimeout as e:
            self.error = e
        else:
            self.error = None

    def then_it_should_fail_with_readiness_timeout(self):
        assert isinstance(self.error, ReadinessTimeout)
        assert self.error.service == Config.DATABASE_SERVICE

    def and_logs_should_be_checked_configured_times(self):
        assert len(self.journal.of('compose')) == 1 + Config.DATABASE_CHECK_ATTEMPTS
