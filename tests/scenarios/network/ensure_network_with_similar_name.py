import vedro

from contexts.sites import site_config
from contexts.sites import sites_root
from sitekeeper.core.global_services import GlobalServicesController
from sitekeeper.helpers.jobs_result import JobResult

DOCKER_RECORDING_CALLS = (
    'sh -c \''
    'echo "$*" >> calls.log; '
    'printf "NETWORK ID     NAME             DRIVER    SCOPE\\n0123456789ab   wplocaldocker2   bridge    local\\n"'
    '\' sh'
)


class Scenario(vedro.Scenario):
    subject = 'ensure network when only similar network exists'

    def given_docker_with_similar_network(self):
        self.root = sites_root()
        self.controller = GlobalServicesController(site_config(self.root, docker_binary=DOCKER_RECORDING_CALLS))

    async def when_network_ensured(self):
        self.result = await self.controller.ensure_network_exists()

    def then_it_should_succeed(self):
        assert self.result == JobResult.GOOD

    def and_network_should_be_created(self):
        assert (self.root / 'calls.log').read_text().splitlines() == [
            'network ls --filter name=wplocaldocker',
            'network create wplocaldocker',
        ]
