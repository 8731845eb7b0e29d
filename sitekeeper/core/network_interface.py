import shlex

from sitekeeper.core.config import Config
from sitekeeper.core.utils.process_command_output import run_shell
from sitekeeper.helpers.jobs_result import JobResult
from sitekeeper.helpers.jobs_result import OperationError


class DockerNetworkInterface:
    def __init__(self, config: Config):
        self.docker_binary = config.docker_binary
        self.network_name = config.network_name
        self.cwd = config.root_path
        self.verbose_commands = config.verbose_commands

    async def _execute(self, subcommand: str, verbose: bool) -> tuple[int, bytes, bytes]:
        return await run_shell(f'{self.docker_binary} network {subcommand}', cwd=self.cwd, verbose=verbose)

    @staticmethod
    def _error(returncode: int, stdout: bytes, stderr: bytes) -> OperationError:
        return OperationError(
            f'Exit code: {returncode}\n'
            f'Stdout:\n{stdout.decode("utf-8", "replace")}\n\nStderr:\n{stderr.decode("utf-8", "replace")}'
        )

    async def ls_filtered(self) -> tuple[JobResult, str] | tuple[OperationError, None]:
        returncode, stdout, stderr = await self._execute(
            f'ls --filter name={shlex.quote(self.network_name)}', verbose=False
        )
        if returncode != 0:
            return self._error(returncode, stdout, stderr), None
        return JobResult.GOOD, stdout.decode('utf-8', 'replace')

    async def create(self) -> JobResult | OperationError:
        returncode, stdout, stderr = await self._execute(
            f'create {shlex.quote(self.network_name)}', verbose=self.verbose_commands
        )
        if returncode != 0:
            return self._error(returncode, stdout, stderr)
        return JobResult.GOOD

    async def rm(self) -> JobResult | OperationError:
        returncode, stdout, stderr = await self._execute(
            f'rm {shlex.quote(self.network_name)}', verbose=self.verbose_commands
        )
        if returncode != 0:
            return self._error(returncode, stdout, stderr)
        return JobResult.GOOD
