from functools import partial
from typing import Awaitable
from typing import Callable

from rich.text import Text
from rtry import retry

from sitekeeper.core.compose_interface import ComposeShellInterface
from sitekeeper.errors import ReadinessTimeout
from sitekeeper.helpers.countdown_counter import CountdownCounterKeeper
from sitekeeper.helpers.jobs_result import JobResult
from sitekeeper.output.console import CONSOLE
from sitekeeper.output.styles import Style


async def check_database_ready(
    compose_interface: ComposeShellInterface,
    service: str,
    ready_marker: str,
    counter_keeper: CountdownCounterKeeper,
) -> JobResult:
    CONSOLE.print(Text(f'Waiting for {service}...', style=Style.info))

    job_result, logs = await compose_interface.dc_logs([service])
    if job_result == JobResult.GOOD and ready_marker in logs.decode('utf-8', 'replace'):
        CONSOLE.print(Text(f' ✔ {service} is ready', style=Style.good))
        return JobResult.GOOD

    counter_keeper.tick()
    if counter_keeper.is_done():
        CONSOLE.print(Text(f' ✗ Stop retries. {service} is still not ready', style=Style.bad))

    return JobResult.BAD


class WaitDatabaseReady:
    def __init__(self, attempts: int = 120, delay_s: float = 1):
        self._attempts = attempts
        self._delay_s = delay_s

    def make_checker(self) -> Callable[..., Awaitable[JobResult]]:
        return partial(
            retry(
                attempts=self._attempts,
                delay=self._delay_s,
                until=lambda x: x != JobResult.GOOD
            )(check_database_ready),
            counter_keeper=CountdownCounterKeeper(self._attempts),
        )

    async def __call__(self, compose_interface: ComposeShellInterface, service: str, ready_marker: str) -> None:
        result = await self.make_checker()(compose_interface, service, ready_marker)
        if result != JobResult.GOOD:
            raise ReadinessTimeout(service, self._attempts)
