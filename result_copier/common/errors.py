from collections.abc import Sequence
from dataclasses import dataclass

from result_copier.common.enums import ErrorKind


@dataclass(frozen=True)
class Failure:
    """
    A single failure observed during a copy.
    It contains:
        - the stage the failure came from (kind);
        - the exception raised by the collaborator.
    """

    kind: ErrorKind
    exception: Exception

    @property
    def message(self) -> str:
        return str(self.exception) or type(self.exception).__name__

    def __str__(self):
        return f"{self.kind}: {self.message}"


class OutcomeError(Exception):
    """The single error surfaced by a failed copy: a primary failure plus the failures it superseded"""

    def __init__(self, primary: Failure, suppressed: Sequence[Failure] = ()):
        super().__init__(primary.message)
        self.primary = primary
        self.suppressed: tuple[Failure, ...] = tuple(suppressed)
        for failure in self.suppressed:
            self.add_note(f"Suppressed {failure}")

    @property
    def kind(self) -> ErrorKind:
        return self.primary.kind


class AcquisitionError(OutcomeError):
    """The connection or the writer could not be obtained"""


class OperationError(OutcomeError):
    """The copy itself failed"""


class ReleaseError(OutcomeError):
    """Closing a resource failed and nothing more important happened"""


_KIND_TO_ERROR_CLS_MAP: dict[ErrorKind, type[OutcomeError]] = {
    ErrorKind.CONNECTION: AcquisitionError,
    ErrorKind.WRITER: AcquisitionError,
    ErrorKind.COPY: OperationError,
    ErrorKind.CLOSE: ReleaseError,
}


def build_outcome_error(primary: Failure, suppressed: Sequence[Failure] = ()) -> OutcomeError:
    return _KIND_TO_ERROR_CLS_MAP[primary.kind](primary, suppressed)


def combine_failures(
    operation_failure: Failure | None, close_failures: Sequence[Failure]
) -> tuple[Failure | None, tuple[Failure, ...]]:
    """
    Picks the primary failure and the ordered suppressed ones.
    An acquisition or copy failure always wins and keeps every close failure in release order.
    Otherwise the close failure observed first wins and the later ones are suppressed under it.
    """
    if operation_failure is not None:
        return operation_failure, tuple(close_failures)
    if not close_failures:
        return None, ()
    first, *later = close_failures
    return first, tuple(later)
