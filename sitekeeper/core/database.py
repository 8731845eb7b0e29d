import asyncio

import pymysql

from sitekeeper.core.config import Config
from sitekeeper.errors import DatabaseOperationError


def quote_identifier(name: str) -> str:
    return '`' + name.replace('`', '``') + '`'


class DatabaseClient:
    def __init__(self, config: Config):
        self.host = config.database_host
        self.port = config.database_port
        self.user = config.database_user
        self.password = config.database_password

    def _connect(self) -> pymysql.connections.Connection:
        return pymysql.connect(
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            connect_timeout=10,
        )

    def _drop_database(self, name: str) -> None:
        try:
            connection = self._connect()
        except pymysql.MySQLError as e:
            raise DatabaseOperationError(f"Can't connect to {self.host}:{self.port}: {e}") from e

        try:
            with connection.cursor() as cursor:
                cursor.execute(f'DROP DATABASE IF EXISTS {quote_identifier(name)};')
        except pymysql.MySQLError as e:
            raise DatabaseOperationError(f"Can't drop database {name}: {e}") from e
        finally:
            connection.close()

    async def drop_database(self, name: str) -> None:
        await asyncio.to_thread(self._drop_database, name)
