from collections.abc import Callable
from logging import getLogger

from result_copier.acquirers import DatabaseResourceAcquirer, ResourceAcquirerProtocol
from result_copier.common.enums import CopyState, ReleasePolicy
from result_copier.config import settings
from result_copier.copiers import ManualResultSetCopier, ResultSetCopier, ScopedResultSetCopier
from result_copier.utils.timer import timer


logger = getLogger("COPY_MANAGER")


class CopyManager:
    """Manages copying, including the choice of the release policy"""

    _POLICY_TO_COPIER_MAP: dict[ReleasePolicy, type[ResultSetCopier]] = {
        ReleasePolicy.SCOPED: ScopedResultSetCopier,
        ReleasePolicy.MANUAL: ManualResultSetCopier,
    }

    @classmethod
    def get_copier(
        cls,
        *,
        acquirer: ResourceAcquirerProtocol,
        release_policy: ReleasePolicy,
        state_callback: Callable[[CopyState], None] | None = None,
    ) -> ResultSetCopier:
        copier_class = cls._POLICY_TO_COPIER_MAP[ReleasePolicy(release_policy)]
        return copier_class(acquirer=acquirer, state_callback=state_callback)

    @classmethod
    @timer
    def copy_result_set(cls, *, db_dsn: str, query: str, output: str, release_policy: ReleasePolicy) -> None:
        logger.info("copy query results to %s (release policy: %s)", output, release_policy)
        acquirer = DatabaseResourceAcquirer(database_dsn=db_dsn, encoding=settings.OUTPUT_ENCODING)
        copier = cls.get_copier(acquirer=acquirer, release_policy=release_policy)
        copier.copy_result_set_to_file(query=query, file_name=output)

    @classmethod
    def check_connection(cls, *, db_dsn: str, release_policy: ReleasePolicy) -> None:
        acquirer = DatabaseResourceAcquirer(database_dsn=db_dsn, encoding=settings.OUTPUT_ENCODING)
        cls.get_copier(acquirer=acquirer, release_policy=release_policy).check_connection()
