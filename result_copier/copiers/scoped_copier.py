from contextlib import ExitStack

from result_copier.common.enums import CopyState, ErrorKind
from result_copier.common.errors import Failure
from result_copier.copiers.base_copier import ResultSetCopier


class ScopedResultSetCopier(ResultSetCopier):
    """
    Releases the resources in reverse order of acquisition: the writer first, then the connection.
    Every close failure is kept: suppressed under the acquisition or copy failure if there is one,
    otherwise the first close failure, the writer's, is raised with the connection's one suppressed.
    """

    KEEPS_CLOSE_FAILURES = True

    def copy_result_set_to_file(self, query: str, file_name: str) -> None:
        operation_failure: Failure | None = None
        close_failures: list[Failure] = []

        self._enter_state(CopyState.INIT)
        connection = self._acquire_connection()
        with ExitStack() as resources:
            resources.callback(self._release, connection, CopyState.CONNECTION_RELEASED, close_failures)
            try:
                writer = self.acquirer.acquire_writer(file_name)
            except Exception as exc:
                operation_failure = Failure(ErrorKind.WRITER, exc)
            else:
                self._enter_state(CopyState.WRITER_ACQUIRED)
                resources.callback(self._release, writer, CopyState.WRITER_RELEASED, close_failures)
                try:
                    self.acquirer.copy_rows(connection, query, writer)
                except Exception as exc:
                    operation_failure = Failure(ErrorKind.COPY, exc)
                else:
                    self._enter_state(CopyState.COPIED)

        self._finish(operation_failure, close_failures)
