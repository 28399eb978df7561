import abc
from collections.abc import Callable, Sequence
from logging import getLogger

from result_copier.acquirers import Resource, ResourceAcquirerProtocol
from result_copier.common.enums import CopyState, ErrorKind
from result_copier.common.errors import Failure, build_outcome_error, combine_failures


logger = getLogger("RESULT_SET_COPIER")


class ResultSetCopier(abc.ABC):
    """
    Copier's abstract class.
    Acquires the connection and the writer, delegates the copy to the acquirer
    and releases both resources before returning. Subclasses decide the release order
    and what happens to close failures.
    """

    KEEPS_CLOSE_FAILURES: bool

    def __init__(
        self,
        acquirer: ResourceAcquirerProtocol,
        state_callback: Callable[[CopyState], None] | None = None,
    ):
        self.acquirer = acquirer
        self._state_callback = state_callback

    @abc.abstractmethod
    def copy_result_set_to_file(self, query: str, file_name: str) -> None:
        raise NotImplementedError("copy_result_set_to_file method is not implemented")

    def check_connection(self) -> None:
        """Acquires a connection and releases it right away"""
        close_failures: list[Failure] = []
        self._enter_state(CopyState.INIT)
        connection = self._acquire_connection()
        self._release(connection, CopyState.CONNECTION_RELEASED, close_failures)
        self._finish(None, close_failures)

    def _acquire_connection(self) -> Resource | None:
        try:
            connection = self.acquirer.acquire_connection()
        except Exception as exc:
            self._enter_state(CopyState.DONE)
            raise build_outcome_error(Failure(ErrorKind.CONNECTION, exc)) from exc
        self._enter_state(CopyState.CONNECTION_ACQUIRED)
        return connection

    def _enter_state(self, state: CopyState) -> None:
        logger.debug("state: %s", state)
        if self._state_callback is not None:
            self._state_callback(state)

    def _release(self, resource: Resource | None, released_state: CopyState, close_failures: list[Failure]) -> None:
        if resource is not None:
            try:
                resource.close()
            except Exception as exc:
                failure = Failure(ErrorKind.CLOSE, exc)
                if self.KEEPS_CLOSE_FAILURES:
                    close_failures.append(failure)
                else:
                    logger.debug("%s discarded on %s", failure, released_state)
        self._enter_state(released_state)

    def _finish(self, operation_failure: Failure | None, close_failures: Sequence[Failure]) -> None:
        primary, suppressed = combine_failures(operation_failure, close_failures)
        self._enter_state(CopyState.DONE)
        if primary is not None:
            raise build_outcome_error(primary, suppressed) from primary.exception
