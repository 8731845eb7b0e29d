import shlex
from enum import Enum
from pathlib import Path

from rich.text import Text

from sitekeeper.core.config import Config
from sitekeeper.core.utils.process_command_output import run_shell
from sitekeeper.helpers.jobs_result import JobResult
from sitekeeper.helpers.jobs_result import OperationError
from sitekeeper.output.console import CONSOLE
from sitekeeper.output.styles import Style


class ComposeAction(Enum):
    UP = 'up -d'
    DOWN = 'down'
    RESTART = 'restart'


class ComposeShellInterface:
    def __init__(self, project_root: Path | str, config: Config):
        self.project_root = Path(project_root)
        self.compose_binary = config.compose_binary
        self.verbose_commands = config.verbose_commands

    async def _execute(self, subcommand: str, verbose: bool = None) -> tuple[int, bytes, bytes]:
        if verbose is None:
            verbose = self.verbose_commands
        return await run_shell(f'{self.compose_binary} {subcommand}', cwd=self.project_root, verbose=verbose)

    async def run(self, action: ComposeAction) -> JobResult | OperationError:
        returncode, stdout, stderr = await self._execute(action.value)

        if returncode != 0:
            CONSOLE.print(Text(f"Can't {action.name.lower()} {self.project_root} (exit code {returncode})",
                               style=Style.bad))
            return OperationError(
                f'Command: {self.compose_binary} {action.value}\nIn: {self.project_root}\n'
                f'Stdout:\n{stdout.decode("utf-8", "replace")}\n\nStderr:\n{stderr.decode("utf-8", "replace")}'
            )

        return JobResult.GOOD

    async def dc_up(self) -> JobResult | OperationError:
        return await self.run(ComposeAction.UP)

    async def dc_down(self) -> JobResult | OperationError:
        return await self.run(ComposeAction.DOWN)

    async def dc_restart(self) -> JobResult | OperationError:
        return await self.run(ComposeAction.RESTART)

    async def dc_logs(self, services: list[str]) -> tuple[JobResult, bytes] | tuple[OperationError, None]:
        services = ' '.join(shlex.quote(service) for service in services)
        returncode, stdout, stderr = await self._execute(f'logs {services}', verbose=False)

        if returncode != 0:
            print(f"Can't get {services} logs")
            return OperationError(
                f'Stdout:\n{stdout.decode("utf-8", "replace")}\n\nStderr:\n{stderr.decode("utf-8", "replace")}'
            ), None

        return JobResult.GOOD, stdout
