import os
from pathlib import Path

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


class Config:
    """
    Paths, names and credentials for one invocation.

    Built once at startup and handed to every component, nothing reads the environment later.
    Any field can be overridden with a keyword argument, the rest fall back to SITEKEEPER_* env vars.
    """

    def __init__(self, **overrides):
        self.root_path: Path = Path(overrides.get('root_path') or os.environ.get('SITEKEEPER_ROOT') or os.getcwd())
        self.sites_path: Path = Path(
            overrides.get('sites_path')
            or os.environ.get('SITEKEEPER_SITES_DIRECTORY')
            or self.root_path / 'sites'
        )
        self.global_path: Path = Path(
            overrides.get('global_path')
            or os.environ.get('SITEKEEPER_GLOBAL_DIRECTORY')
            or self.root_path / 'global'
        )
        self.network_name: str = overrides.get(
            'network_name', os.environ.get('SITEKEEPER_NETWORK_NAME', 'wplocaldocker')
        )
        self.compose_binary: str = overrides.get(
            'compose_binary', os.environ.get('SITEKEEPER_COMPOSE_BINARY', 'docker-compose')
        )
        self.docker_binary: str = overrides.get(
            'docker_binary', os.environ.get('SITEKEEPER_DOCKER_BINARY', 'docker')
        )

        self.database_service: str = overrides.get(
            'database_service', os.environ.get('SITEKEEPER_DATABASE_SERVICE', 'mysql')
        )
        self.database_ready_marker: str = overrides.get(
            'database_ready_marker', os.environ.get('SITEKEEPER_DATABASE_READY_MARKER', 'ready for connections')
        )
        self.database_check_attempts: int = int(overrides.get(
            'database_check_attempts', os.environ.get('SITEKEEPER_DATABASE_CHECK_ATTEMPTS', 120)
        ))
        self.database_check_delay: float = float(overrides.get(
            'database_check_delay', os.environ.get('SITEKEEPER_DATABASE_CHECK_DELAY', 1)
        ))
        self.database_host: str = overrides.get(
            'database_host', os.environ.get('SITEKEEPER_DATABASE_HOST', '127.0.0.1')
        )
        self.database_port: int = int(overrides.get(
            'database_port', os.environ.get('SITEKEEPER_DATABASE_PORT', 3306)
        ))
        self.database_user: str = overrides.get(
            'database_user', os.environ.get('SITEKEEPER_DATABASE_USER', 'root')
        )
        self.database_password: str = overrides.get(
            'database_password', os.environ.get('SITEKEEPER_DATABASE_PASSWORD', 'password')
        )

        self.verbose_commands: bool = overrides.get(
            'verbose_commands', _env_flag('SITEKEEPER_VERBOSE_COMMANDS', True)
        )
        self.continue_on_error: bool = overrides.get(
            'continue_on_error', _env_flag('SITEKEEPER_CONTINUE_ON_ERROR', True)
        )

    def __repr__(self):
        return f'Config(sites_path={self.sites_path}, global_path={self.global_path}, network={self.network_name})'
