import shutil
from enum import Enum
from enum import auto
from pathlib import Path
from typing import Callable

from rich.text import Text

from sitekeeper.core.compose_interface import ComposeShellInterface
from sitekeeper.core.config import Config
from sitekeeper.core.confirmation import Confirmation
from sitekeeper.core.database import DatabaseClient
from sitekeeper.core.registry import EnvironmentRegistry
from sitekeeper.core.registry import SiteEnvironment
from sitekeeper.errors import DatabaseOperationError
from sitekeeper.helpers.jobs_result import JobResult
from sitekeeper.helpers.jobs_result import OperationError
from sitekeeper.output.console import CONSOLE
from sitekeeper.output.styles import Style


class DeletionState(Enum):
    IDLE = auto()
    AWAITING_CONFIRMATION = auto()
    ABORTED = auto()
    CONFIRMED = auto()
    STOPPING_ENVIRONMENT = auto()
    REMOVING_FILES = auto()
    DROPPING_DATABASE = auto()
    DONE = auto()


class DeletionWorkflow:
    """
    Confirm -> down -> rm -rf site directory -> DROP DATABASE.

    Not transactional: files are gone before the database drop is attempted,
    a failed drop leaves the schema behind and is only reported.
    """

    def __init__(self,
                 config: Config,
                 registry: EnvironmentRegistry,
                 confirmation: Confirmation,
                 database_client: DatabaseClient,
                 compose_interface: type[ComposeShellInterface] = ComposeShellInterface,
                 remove_tree: Callable[[Path], None] = shutil.rmtree):
        self._config = config
        self._registry = registry
        self._confirmation = confirmation
        self._database_client = database_client
        self._compose_interface = compose_interface
        self._remove_tree = remove_tree
        self.states: list[DeletionState] = [DeletionState.IDLE]

    @property
    def state(self) -> DeletionState:
        return self.states[-1]

    def _move_to(self, state: DeletionState):
        self.states.append(state)

    async def run(self, name: str) -> JobResult | OperationError | None:
        environment = self._registry.resolve(name)

        self._move_to(DeletionState.AWAITING_CONFIRMATION)
        if not self._confirmation.ask(f'Are you sure you want to delete the {environment.name} environment?'):
            self._move_to(DeletionState.ABORTED)
            CONSOLE.print(Text('Nothing deleted', style=Style.regular))
            return None

        self._move_to(DeletionState.CONFIRMED)
        return await self._delete(environment)

    async def _delete(self, environment: SiteEnvironment) -> JobResult | OperationError:
        self._move_to(DeletionState.STOPPING_ENVIRONMENT)
        CONSOLE.print(Text('Stopping docker containers for ', style=Style.info)
                      .append(Text(environment.name, style=Style.mark)))
        job_result = await self._compose_interface(environment.path, self._config).dc_down()
        if job_result != JobResult.GOOD:
            CONSOLE.print(Text(' ! Containers were not stopped cleanly, deleting anyway', style=Style.warn))
        CONSOLE.print()

        self._move_to(DeletionState.REMOVING_FILES)
        CONSOLE.print(Text('Deleting files', style=Style.info))
        try:
            self._remove_tree(environment.path)
        except OSError as e:
            CONSOLE.print(Text(f" ✗ Can't delete {environment.path}: {e}", style=Style.bad))
            CONSOLE.print(Text(f'Database {environment.slug} is kept, fix the files and run delete again',
                               style=Style.warn))
            return OperationError(f"Can't delete {environment.path}: {e}")
        CONSOLE.print()

        self._move_to(DeletionState.DROPPING_DATABASE)
        CONSOLE.print(Text('Deleting database ', style=Style.info)
                      .append(Text(environment.slug, style=Style.mark)))
        try:
            await self._database_client.drop_database(environment.slug)
        except DatabaseOperationError as e:
            CONSOLE.print(Text(f' ✗ {e}', style=Style.bad))
            CONSOLE.print(Text(f'Files of {environment.name} are already removed, drop the database manually',
                               style=Style.warn))
            return OperationError(str(e))

        self._move_to(DeletionState.DONE)
        CONSOLE.print(Text(f' ✔ {environment.name} deleted', style=Style.good))
        return JobResult.GOOD
