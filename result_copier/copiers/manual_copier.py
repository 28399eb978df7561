from result_copier.common.enums import CopyState, ErrorKind
from result_copier.common.errors import Failure
from result_copier.copiers.base_copier import ResultSetCopier


class ManualResultSetCopier(ResultSetCopier):
    """
    Releases the resources in the finally block in order of acquisition: the connection first, then the writer.
    Close failures are discarded, only an acquisition or copy failure reaches the caller.
    """

    KEEPS_CLOSE_FAILURES = False

    def copy_result_set_to_file(self, query: str, file_name: str) -> None:
        operation_failure: Failure | None = None
        writer = None
        writer_acquired = False

        self._enter_state(CopyState.INIT)
        connection = self._acquire_connection()
        try:
            writer = self.acquirer.acquire_writer(file_name)
            writer_acquired = True
            self._enter_state(CopyState.WRITER_ACQUIRED)
            self.acquirer.copy_rows(connection, query, writer)
            self._enter_state(CopyState.COPIED)
        except Exception as exc:
            operation_failure = Failure(ErrorKind.COPY if writer_acquired else ErrorKind.WRITER, exc)
        finally:
            self._release(connection, CopyState.CONNECTION_RELEASED, [])
            if writer_acquired:
                self._release(writer, CopyState.WRITER_RELEASED, [])

        self._finish(operation_failure, ())
