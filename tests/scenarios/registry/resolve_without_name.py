import vedro

from contexts.sites import site_config
from contexts.sites import sites_root
from sitekeeper.core.registry import EnvironmentRegistry
from sitekeeper.errors import UsageError


class Scenario(vedro.Scenario):
    subject = 'resolve without environment name'

    def given_registry(self):
        self.registry = EnvironmentRegistry(site_config(sites_root('docker-test')))

    def when_user_resolves_nothing(self):
        self.errors = []
        for name in (None, ''):
            try:
                self.registry.resolve(name)
            except UsageError as e:
                self.errors.append(e)

    def then_it_should_fail_with_usage_error(self):
        assert len(self.errors) == 2
