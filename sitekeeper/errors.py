class SiteKeeperError(Exception):
    pass


class UsageError(SiteKeeperError):
    pass


class EnvironmentNotFound(SiteKeeperError):
    def __init__(self, name: str, path):
        self.name = name
        self.path = path
        super().__init__(f'Cannot find {name} site!')


class OrchestrationError(SiteKeeperError):
    def __init__(self, message: str, log: str = ''):
        self.log = log
        super().__init__(message)


class ReadinessTimeout(SiteKeeperError):
    def __init__(self, service: str, attempts: int):
        self.service = service
        self.attempts = attempts
        super().__init__(f'{service} did not report readiness after {attempts} checks')


class DatabaseOperationError(SiteKeeperError):
    pass
