from dataclasses import dataclass
from dataclasses import field
from typing import Awaitable
from typing import Callable

from rich.text import Text

from sitekeeper.core.compose_interface import ComposeAction
from sitekeeper.core.compose_interface import ComposeShellInterface
from sitekeeper.core.config import Config
from sitekeeper.core.confirmation import Confirmation
from sitekeeper.core.confirmation import RichConfirmation
from sitekeeper.core.database import DatabaseClient
from sitekeeper.core.deletion import DeletionWorkflow
from sitekeeper.core.global_services import GlobalServicesController
from sitekeeper.core.network_interface import DockerNetworkInterface
from sitekeeper.core.readiness import WaitDatabaseReady
from sitekeeper.core.registry import EnvironmentRegistry
from sitekeeper.core.registry import SiteEnvironment
from sitekeeper.helpers.jobs_result import JobResult
from sitekeeper.helpers.jobs_result import OperationError
from sitekeeper.output.console import CONSOLE
from sitekeeper.output.styles import Style

_ACTION_TITLES = {
    ComposeAction.UP: 'Starting',
    ComposeAction.DOWN: 'Stopping',
    ComposeAction.RESTART: 'Restarting',
}


@dataclass
class BulkResult:
    results: dict[str, JobResult | OperationError] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)
    global_result: JobResult | OperationError | None = None

    @property
    def failed(self) -> list[str]:
        return [slug for slug, result in self.results.items() if result != JobResult.GOOD]

    @property
    def ok(self) -> bool:
        return not self.failed and not self.skipped and self.global_result != JobResult.BAD


class SiteKeeperService:
    def __init__(self,
                 config: Config = None,
                 compose_interface: type[ComposeShellInterface] = ComposeShellInterface,
                 network_interface: type[DockerNetworkInterface] = DockerNetworkInterface,
                 database_client: DatabaseClient = None,
                 confirmation: Confirmation = None,
                 wait_database_ready: WaitDatabaseReady = None):
        if config is None:
            config = Config()
        self._config = config
        self._compose_interface = compose_interface
        self._continue_on_error = config.continue_on_error

        self.registry = EnvironmentRegistry(config)
        self.global_services = GlobalServicesController(
            config,
            compose_interface=compose_interface,
            network_interface=network_interface,
            wait_database_ready=wait_database_ready,
        )

        self._database_client = database_client if database_client is not None else DatabaseClient(config)
        self._confirmation = confirmation if confirmation is not None else RichConfirmation()

    async def _run(self, environment: SiteEnvironment, action: ComposeAction) -> JobResult | OperationError:
        CONSOLE.print(
            Text(f'{_ACTION_TITLES[action]} docker containers for ', style=Style.info)
            .append(Text(environment.name, style=Style.mark))
        )
        job_result = await self._compose_interface(environment.path, self._config).run(action)
        CONSOLE.print()
        return job_result

    async def start(self, name: str) -> JobResult | OperationError:
        return await self._run(self.registry.resolve(name), ComposeAction.UP)

    async def stop(self, name: str) -> JobResult | OperationError:
        return await self._run(self.registry.resolve(name), ComposeAction.DOWN)

    async def restart(self, name: str) -> JobResult | OperationError:
        return await self._run(self.registry.resolve(name), ComposeAction.RESTART)

    async def delete(self, name: str, confirmation: Confirmation = None) -> JobResult | OperationError | None:
        workflow = DeletionWorkflow(
            self._config,
            self.registry,
            confirmation if confirmation is not None else self._confirmation,
            self._database_client,
            compose_interface=self._compose_interface,
        )
        return await workflow.run(name)

    async def _run_all(self, action: ComposeAction) -> BulkResult:
        bulk_result = BulkResult()
        environments = self.registry.list_all()
        for index, environment in enumerate(environments):
            job_result = await self._run(environment, action)
            bulk_result.results[environment.slug] = job_result

            if job_result != JobResult.GOOD and not self._continue_on_error:
                bulk_result.skipped = [skipped.slug for skipped in environments[index + 1:]]
                CONSOLE.print(Text(f' ✗ Stopped on {environment.slug}, skipped: {bulk_result.skipped}',
                                   style=Style.bad))
                break

        return bulk_result

    async def _run_all_then_global(
        self, action: ComposeAction, global_operation: Callable[[], Awaitable[JobResult | OperationError]]
    ) -> BulkResult:
        bulk_result = await self._run_all(action)
        if bulk_result.failed and not self._continue_on_error:
            return bulk_result

        bulk_result.global_result = await global_operation()
        return bulk_result

    async def start_all(self) -> BulkResult:
        return await self._run_all(ComposeAction.UP)

    async def stop_all(self) -> BulkResult:
        return await self._run_all_then_global(ComposeAction.DOWN, self.global_services.stop_global)

    async def restart_all(self) -> BulkResult:
        return await self._run_all_then_global(ComposeAction.RESTART, self.global_services.restart_global)

    async def start_global(self) -> JobResult:
        return await self.global_services.start_global()

    async def stop_global(self) -> JobResult | OperationError:
        return await self.global_services.stop_global()

    async def restart_global(self) -> JobResult | OperationError:
        return await self.global_services.restart_global()
