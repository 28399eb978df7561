import pytest

from result_copier.common.enums import CopyState, ErrorKind, ReleasePolicy
from result_copier.common.errors import OutcomeError


QUERY = "select 1 from account"
FILE_NAME = "account.csv"


@pytest.fixture(params=list(ReleasePolicy))
def copier(request, make_copier):
    return make_copier(request.param)


def test_each_resource_is_closed_exactly_once(copier, acquirer):
    copier.copy_result_set_to_file(QUERY, FILE_NAME)

    assert acquirer.connection.close_count == 1
    assert acquirer.writer.close_count == 1


def test_both_absent_resources_are_not_closed(copier, acquirer, states):
    acquirer.connection = None
    acquirer.writer = None

    copier.copy_result_set_to_file(QUERY, FILE_NAME)

    assert acquirer.calls == ["acquire_connection", "acquire_writer", "copy_rows"]
    assert acquirer.copied == [(None, QUERY, None)]
    assert CopyState.WRITER_RELEASED in states
    assert states[-1] == CopyState.DONE


def test_connection_acquisition_failure_is_chained_and_ends_the_copy(copier, acquirer, states):
    connection_error = ConnectionRefusedError("Exception while creating new connection")
    acquirer.connection_error = connection_error

    with pytest.raises(OutcomeError) as exc_info:
        copier.copy_result_set_to_file(QUERY, FILE_NAME)

    assert exc_info.value.kind == ErrorKind.CONNECTION
    assert exc_info.value.__cause__ is connection_error
    assert states == [CopyState.INIT, CopyState.DONE]


def test_resources_are_released_when_copy_is_interrupted(copier, acquirer):
    acquirer.copy_error = KeyboardInterrupt()

    with pytest.raises(KeyboardInterrupt):
        copier.copy_result_set_to_file(QUERY, FILE_NAME)

    assert acquirer.connection.close_count == 1
    assert acquirer.writer.close_count == 1


def test_interrupted_connection_acquisition_is_not_classified(copier, acquirer):
    acquirer.connection_error = KeyboardInterrupt()

    with pytest.raises(KeyboardInterrupt):
        copier.copy_result_set_to_file(QUERY, FILE_NAME)

    assert acquirer.calls == ["acquire_connection"]


def test_copy_failure_is_primary_for_every_policy(copier, acquirer):
    acquirer.copy_error = ValueError("Exception in copy_rows")
    acquirer.writer.close_error = OSError("Exception while closing writer")

    with pytest.raises(OutcomeError) as exc_info:
        copier.copy_result_set_to_file(QUERY, FILE_NAME)

    assert exc_info.value.kind == ErrorKind.COPY
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_copier_can_be_reused_after_failure(copier, acquirer):
    acquirer.copy_error = ValueError("Exception in copy_rows")
    with pytest.raises(OutcomeError):
        copier.copy_result_set_to_file(QUERY, FILE_NAME)

    acquirer.copy_error = None
    copier.copy_result_set_to_file(QUERY, FILE_NAME)

    assert acquirer.connection.close_count == 2
    assert acquirer.writer.close_count == 2
