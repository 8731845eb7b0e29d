import vedro

from contexts.global_services import global_controller
from contexts.sites import sites_root
from helpers.fakes import Journal


class Scenario(vedro.Scenario):
    subject = 'stop global services'

    def given_running_global_services(self):
        self.journal = Journal()
        self.controller = global_controller(sites_root(), self.journal, network_exists=True)

    async def when_global_services_stopped(self):
        await self.controller.stop_global()

    def then_stack_should_be_stopped_before_network_removal(self):
        assert self.journal == [
            ('compose', 'down', 'global'),
            ('network', 'rm'),
        ]
