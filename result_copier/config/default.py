from dataclasses import dataclass
from os import environ


@dataclass
class Settings:
    ENV = environ.get("ENV", "local")

    SOURCE_DATABASE_DSN = environ.get("SOURCE_DATABASE_DSN")
    SOURCE_DATABASE_NAME = environ.get("SOURCE_DATABASE_NAME", "source")
    SOURCE_DATABASE_HOST = environ.get("SOURCE_DATABASE_HOST", "localhost")
    SOURCE_DATABASE_PORT = environ.get("SOURCE_DATABASE_PORT", "5432")
    SOURCE_DATABASE_USER = environ.get("SOURCE_DATABASE_USER", "postgres")
    SOURCE_DATABASE_PASSWORD = environ.get("SOURCE_DATABASE_PASSWORD", "password")

    RELEASE_POLICY = environ.get("RELEASE_POLICY", "scoped")
    OUTPUT_ENCODING = environ.get("OUTPUT_ENCODING", "utf-8")

    STREAM_LOG_LEVEL = environ.get("STREAM_LOG_LEVEL", "INFO")
    QUERIES_LOG_FILENAME = environ.get("QUERIES_LOG_FILENAME", "result_copier_queries.log")

    @property
    def source_database_dsn(self):
        if self.SOURCE_DATABASE_DSN:
            return self.SOURCE_DATABASE_DSN
        return (
            f"postgresql://"
            f"{self.SOURCE_DATABASE_USER}:"
            f"{self.SOURCE_DATABASE_PASSWORD}@"
            f"{self.SOURCE_DATABASE_HOST}:"
            f"{self.SOURCE_DATABASE_PORT}/"
            f"{self.SOURCE_DATABASE_NAME}"
        )
