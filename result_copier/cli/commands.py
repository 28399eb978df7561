from logging import getLogger

import click

from result_copier.common.enums import ReleasePolicy
from result_copier.common.errors import OutcomeError
from result_copier.config import settings
from result_copier.task_managers import CopyManager


logger = getLogger("CLI")

RELEASE_POLICY_CHOICE = click.Choice([policy.value for policy in ReleasePolicy])


def _report(error: OutcomeError) -> None:
    logger.error("Operation failed with %s", error.primary)
    for failure in error.suppressed:
        logger.error("Suppressed %s", failure)


@click.command("copy")
@click.option("--db", required=False, help="Source database connection url", default=settings.source_database_dsn)
@click.option("--query", required=True, help="Query whose results are copied")
@click.option("--output", required=True, help="Name of the output file")
@click.option(
    "--release-policy",
    required=False,
    type=RELEASE_POLICY_CHOICE,
    help="How the connection and the output file are released",
    default=settings.RELEASE_POLICY,
)
def copy_result_set(db: str, query: str, output: str, release_policy: str) -> None:
    """Copy the results of a query into a csv file."""
    try:
        CopyManager.copy_result_set(
            db_dsn=db, query=query, output=output, release_policy=ReleasePolicy(release_policy)
        )
    except OutcomeError as error:
        _report(error)
        raise click.exceptions.Exit(1)


@click.command("check-connection")
@click.option("--db", required=False, help="Source database connection url", default=settings.source_database_dsn)
@click.option(
    "--release-policy",
    required=False,
    type=RELEASE_POLICY_CHOICE,
    help="How the connection is released",
    default=settings.RELEASE_POLICY,
)
def check_connection(db: str, release_policy: str) -> None:
    """Open a connection to the source database and close it."""
    try:
        CopyManager.check_connection(db_dsn=db, release_policy=ReleasePolicy(release_policy))
    except OutcomeError as error:
        _report(error)
        raise click.exceptions.Exit(1)
    click.echo("Connection is ok")
