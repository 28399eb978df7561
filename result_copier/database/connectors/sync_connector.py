from logging import getLogger

import sqlalchemy as sa


stream_logger = getLogger("SYNC_DATABASE_CONNECTOR")
sql_queries_logger = getLogger("sql_queries")


class SyncDatabaseConnector:
    """Connection to the source database. It is the `connection` resource of a copy"""

    def __init__(self, database_dsn: str):
        self.database_dsn = database_dsn
        self.engine: sa.Engine | None = None
        self.connection: sa.Connection | None = None

    def begin(self) -> "SyncDatabaseConnector":
        self.engine = sa.create_engine(self.database_dsn)
        try:
            self.connection = self.engine.connect()
        except Exception:
            self.engine.dispose()
            raise
        stream_logger.debug("connected to %s", self.engine.url.render_as_string(hide_password=True))
        return self

    def close(self) -> None:
        try:
            if self.connection is not None:
                self.connection.close()
        finally:
            if self.engine is not None:
                self.engine.dispose()
            self.connection = None
            self.engine = None

    def execute(self, query: str) -> sa.CursorResult:
        query_strip = query.strip()
        stream_logger.debug(query_strip)
        sql_queries_logger.info("%s\n", query_strip)
        return self.connection.execute(sa.text(query))
