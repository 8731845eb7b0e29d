from unittest.mock import patch

import pymysql
import vedro

from contexts.sites import site_config
from contexts.sites import sites_root
from helpers.recording_mysql import RecordingConnection
from sitekeeper.core.database import DatabaseClient
from sitekeeper.errors import DatabaseOperationError


class Scenario(vedro.Scenario):
    subject = 'drop database query fails'

    def given_database_rejecting_query(self):
        self.connection = RecordingConnection(
            error=pymysql.err.OperationalError(1044, "Access denied for user 'root'@'%'")
        )
        self.client = DatabaseClient(site_config(sites_root()))

    async def when_database_dropped(self):
        try:
            with patch('pymysql.connect', self.connection.connect):
                await self.client.drop_database('docker-test')
        except DatabaseOperationError as e:
            self.error = e
        else:
            self.error = None

    def then_it_should_fail_with_database_error(self):
        assert isinstance(self.error, DatabaseOperationError)
        assert 'Access denied' in str(self.error)

    def and_connection_should_be_closed(self):
        assert self.connection.closed is True
