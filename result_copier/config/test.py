from os import environ

from result_copier.config.default import Settings as DefaultSettings


class Settings(DefaultSettings):
    SOURCE_DATABASE_DSN = environ.get("TEST_SOURCE_DATABASE_DSN", "sqlite://")

    RELEASE_POLICY = "scoped"
    OUTPUT_ENCODING = "utf-8"

    STREAM_LOG_LEVEL = "DEBUG"
