from unittest.mock import patch

import vedro

from contexts.sites import site_config
from contexts.sites import sites_root
from helpers.recording_mysql import RecordingConnection
from sitekeeper.core.database import DatabaseClient


class Scenario(vedro.Scenario):
    subject = 'drop environment database'

    def given_database_client(self):
        self.connection = RecordingConnection()
        self.client = DatabaseClient(site_config(sites_root(), database_password='secret'))

    async def when_database_dropped(self):
        with patch('pymysql.connect', self.connection.connect):
            await self.client.drop_database('docker`test')

    def then_conditional_drop_should_be_issued_with_escaped_name(self):
        assert self.connection.queries == ['DROP DATABASE IF EXISTS `docker``test`;']

    def and_local_credentials_should_be_used(self):
        assert self.connection.connect_params == {
            'host': '127.0.0.1',
            'port': 3306,
            'user': 'root',
            'password': 'secret',
            'connect_timeout': 10,
        }

    def and_connection_should_be_closed(self):
        assert self.connection.closed is True
