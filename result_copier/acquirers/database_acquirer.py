import csv
from logging import getLogger
from typing import TextIO

from result_copier.database.connectors import SyncDatabaseConnector


logger = getLogger("DATABASE_ACQUIRER")


class DatabaseResourceAcquirer:
    """
    Acquires a connection to the source database and a text file for the output.
    Rows are written with the default csv dialect, the first row holds the column names.
    """

    def __init__(self, database_dsn: str, encoding: str = "utf-8"):
        self.database_dsn = database_dsn
        self.encoding = encoding

    def acquire_connection(self) -> SyncDatabaseConnector:
        logger.debug("connect to source database...")
        return SyncDatabaseConnector(database_dsn=self.database_dsn).begin()

    def acquire_writer(self, file_name: str) -> TextIO:
        logger.debug("open %s for writing...", file_name)
        return open(file_name, "w", newline="", encoding=self.encoding)

    def copy_rows(self, connection: SyncDatabaseConnector, query: str, writer: TextIO) -> int:
        result = connection.execute(query=query)
        csv_writer = csv.writer(writer)
        csv_writer.writerow(result.keys())
        rows_num = 0
        for row in result:
            csv_writer.writerow(row)
            rows_num += 1
        logger.debug("%d rows copied", rows_num)
        return rows_num
