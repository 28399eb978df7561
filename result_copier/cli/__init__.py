import click

from .commands import check_connection, copy_result_set


@click.group
def cli() -> None:
    pass


cli.add_command(copy_result_set)
cli.add_command(check_connection)


__all__ = ["cli"]
