from result_copier.cli import cli
from result_copier.utils.logs import setup_logging


def main():
    setup_logging()
    cli()


if __name__ == "__main__":
    main()
