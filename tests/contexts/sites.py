import shutil
import tempfile
from pathlib import Path

import vedro

from sitekeeper.core.config import Config


def sites_root(*slugs: str) -> Path:
    root = Path(tempfile.mkdtemp(prefix='sitekeeper-'))
    (root / 'global').mkdir()
    (root / 'sites').mkdir()
    for slug in slugs:
        site = root / 'sites' / slug
        site.mkdir()
        (site / 'docker-compose.yml').write_text('services: {}\n')

    vedro.defer(shutil.rmtree, root, ignore_errors=True)
    return root


def site_config(root: Path, **overrides) -> Config:
    params = dict(
        root_path=root,
        verbose_commands=False,
        database_check_attempts=3,
        database_check_delay=0,
        continue_on_error=True,
    )
    params.update(overrides)
    return Config(**params)
