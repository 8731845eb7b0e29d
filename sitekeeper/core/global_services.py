"""
Shared network + gateway/database stack every site depends on.

Ordering:
    start   -> ensure network -> up -d global stack -> wait database ready
    stop    -> down global stack -> remove network
    restart -> ensure network -> restart global stack

Network operations are best-effort: failures come back as OperationError and printed as warnings, never raised.
"""
from rich.text import Text

from sitekeeper.core.compose_interface import ComposeShellInterface
from sitekeeper.core.config import Config
from sitekeeper.core.network_interface import DockerNetworkInterface
from sitekeeper.core.readiness import WaitDatabaseReady
from sitekeeper.errors import OrchestrationError
from sitekeeper.helpers.jobs_result import JobResult
from sitekeeper.helpers.jobs_result import OperationError
from sitekeeper.output.console import CONSOLE
from sitekeeper.output.styles import Style


def network_listed(listing: str, network_name: str) -> bool:
    return any(network_name in line.split() for line in listing.splitlines())


class GlobalServicesController:
    def __init__(self,
                 config: Config,
                 compose_interface: type[ComposeShellInterface] = ComposeShellInterface,
                 network_interface: type[DockerNetworkInterface] = DockerNetworkInterface,
                 wait_database_ready: WaitDatabaseReady = None):
        self.network_name = config.network_name
        self.database_service = config.database_service
        self.database_ready_marker = config.database_ready_marker

        self._compose = compose_interface(config.global_path, config)
        self._network = network_interface(config)
        if wait_database_ready is None:
            wait_database_ready = WaitDatabaseReady(
                attempts=config.database_check_attempts,
                delay_s=config.database_check_delay,
            )
        self._wait_database_ready = wait_database_ready

    def _warn(self, message: str, error: OperationError) -> OperationError:
        CONSOLE.print(Text(f' ! {message}', style=Style.warn))
        CONSOLE.print(Text(error.log, style=Style.context))
        return error

    async def ensure_network_exists(self) -> JobResult | OperationError:
        CONSOLE.print(Text('Ensuring global network exists', style=Style.info))

        job_result, listing = await self._network.ls_filtered()
        if job_result != JobResult.GOOD:
            return self._warn(f"Can't list networks, skipping {self.network_name} creation", job_result)

        if network_listed(listing, self.network_name):
            CONSOLE.print(' - Network exists')
            CONSOLE.print()
            return JobResult.GOOD

        CONSOLE.print(' - Creating network')
        CONSOLE.print()
        job_result = await self._network.create()
        if job_result != JobResult.GOOD:
            return self._warn(f"Can't create network {self.network_name}", job_result)

        return JobResult.GOOD

    async def remove_network(self) -> JobResult | OperationError:
        CONSOLE.print(Text('Removing global network', style=Style.info))

        job_result = await self._network.rm()
        if job_result != JobResult.GOOD:
            return self._warn(f"Can't remove network {self.network_name}", job_result)

        return JobResult.GOOD

    async def start_gateway(self) -> JobResult:
        CONSOLE.print(Text('Ensuring global services are running', style=Style.info))

        job_result = await self._compose.dc_up()
        CONSOLE.print()
        if job_result != JobResult.GOOD:
            raise OrchestrationError("Can't start global services", log=job_result.log)

        await self._wait_database_ready(self._compose, self.database_service, self.database_ready_marker)
        return JobResult.GOOD

    async def stop_gateway(self) -> JobResult | OperationError:
        CONSOLE.print(Text('Stopping global services', style=Style.info))
        job_result = await self._compose.dc_down()
        CONSOLE.print()
        return job_result

    async def restart_gateway(self) -> JobResult | OperationError:
        CONSOLE.print(Text('Restarting global services', style=Style.info))
        job_result = await self._compose.dc_restart()
        CONSOLE.print()
        return job_result

    async def start_global(self) -> JobResult:
        await self.ensure_network_exists()
        return await self.start_gateway()

    async def stop_global(self) -> JobResult | OperationError:
        job_result = await self.stop_gateway()
        await self.remove_network()
        return job_result

    async def restart_global(self) -> JobResult | OperationError:
        await self.ensure_network_exists()
        return await self.restart_gateway()
