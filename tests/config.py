import vedro


class Config(vedro.Config):
    NETWORK_NAME = 'wplocaldocker'
    DATABASE_SERVICE = 'mysql'
    READY_MARKER = 'ready for connections'
    DATABASE_CHECK_ATTEMPTS = 3
