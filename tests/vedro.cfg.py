import vedro


class Config(vedro.Config):
    pass
