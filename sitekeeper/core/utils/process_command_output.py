import asyncio
import os
import sys
from pathlib import Path

from rich.text import Text

from sitekeeper.output.console import CONSOLE
from sitekeeper.output.styles import Style

SPAWN_FAILED_CODE = 127


async def process_output_till_done(process: asyncio.subprocess.Process, verbose) -> tuple[bytes, bytes]:
    stdout_lines = []
    stderr_lines = []

    async def read_stream(stream, callback, output_list):
        while True:
            line = await stream.readline()
            if line:
                if verbose:
                    callback(line)
                output_list.append(line)
            else:
                break

    tasks = [
        read_stream(process.stdout, lambda line: sys.stdout.buffer.write(b' > ' + line), stdout_lines),
        read_stream(process.stderr, lambda line: sys.stderr.buffer.write(b' > ' + line), stderr_lines)
    ]

    await asyncio.gather(*tasks)
    await process.wait()

    sys.stdout.flush()
    sys.stderr.flush()

    return b''.join(stdout_lines), b''.join(stderr_lines)


async def run_shell(cmd: str, cwd: Path | str, verbose: bool, env: dict = None) -> tuple[int, bytes, bytes]:
    sys.stdout.flush()

    if env is None:
        env = {}
    env = dict(os.environ) | env

    try:
        process = await asyncio.create_subprocess_shell(
            cmd,
            env=env,
            cwd=cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        CONSOLE.print(Text(f"Can't run {cmd} in {cwd}: {e}", style=Style.bad))
        return SPAWN_FAILED_CODE, b'', str(e).encode('utf-8')

    CONSOLE.print(Text(f'{cmd}', style=Style.context) + ' ' + Text(f'; in {cwd}', style=Style.regular))
    stdout, stderr = await process_output_till_done(process, verbose)
    return process.returncode, stdout, stderr
