from sitekeeper.core.config import Config
from sitekeeper.core.registry import EnvironmentRegistry
from sitekeeper.core.registry import SiteEnvironment
from sitekeeper.core.service import BulkResult
from sitekeeper.core.service import SiteKeeperService
from sitekeeper.core.utils.slug import slugify
from sitekeeper.helpers.jobs_result import JobResult
from sitekeeper.helpers.jobs_result import OperationError
from sitekeeper.version import get_version

__version__ = get_version()
__all__ = (
    'Config', 'SiteKeeperService', 'BulkResult',
    'EnvironmentRegistry', 'SiteEnvironment', 'slugify',
    'JobResult', 'OperationError',
)
