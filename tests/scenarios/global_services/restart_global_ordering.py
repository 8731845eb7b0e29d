import vedro

from contexts.global_services import global_controller
from contexts.sites import sites_root
from helpers.fakes import Journal


class Scenario(vedro.Scenario):
    subject = 'restart global services'

    def given_existing_network(self):
        self.journal = Journal()
        self.controller = global_controller(sites_root(), self.journal, network_exists=True)

    async def when_global_services_restarted(self):
        await self.controller.restart_global()

    def then_network_should_be_checked_before_restart(self):
        assert self.journal == [
            ('network', 'ls'),
            ('compose', 'restart', 'global'),
        ]
