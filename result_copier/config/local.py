from result_copier.config.default import Settings as DefaultSettings


class Settings(DefaultSettings):
    pass
