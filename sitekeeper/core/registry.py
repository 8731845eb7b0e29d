from dataclasses import dataclass
from pathlib import Path

from rich.text import Text

from sitekeeper.core.config import Config
from sitekeeper.core.utils.slug import slugify
from sitekeeper.errors import EnvironmentNotFound
from sitekeeper.errors import UsageError
from sitekeeper.output.console import CONSOLE
from sitekeeper.output.styles import Style


@dataclass(frozen=True)
class SiteEnvironment:
    name: str
    slug: str
    path: Path

    def __str__(self):
        return self.name


class EnvironmentRegistry:
    """
    Environments are just directories under the sites root, nothing is cached between calls.
    """

    def __init__(self, config: Config):
        self._sites_path = config.sites_path

    @property
    def sites_path(self) -> Path:
        return self._sites_path

    def resolve(self, name: str | None) -> SiteEnvironment:
        if not name:
            raise UsageError('ENVIRONMENT is required')

        CONSOLE.print(Text('Locating project files for ', style=Style.info).append(Text(name, style=Style.mark)))

        slug = slugify(name)
        path = self._sites_path / slug
        if not slug or not path.exists():
            raise EnvironmentNotFound(name, path)

        return SiteEnvironment(name=name, slug=slug, path=path)

    def list_all(self) -> list[SiteEnvironment]:
        if not self._sites_path.is_dir():
            return []

        return [
            SiteEnvironment(name=entry.name, slug=entry.name, path=entry)
            for entry in self._sites_path.iterdir()
            if entry.is_dir() and not entry.is_symlink()
        ]
