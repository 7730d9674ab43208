"""Console entry point: `rental-tracker menu`, `rental-tracker seed`, ..."""
from flask.cli import FlaskGroup

from . import create_app

cli = FlaskGroup(create_app=create_app, add_default_commands=False,
                 help="Vehicle rental records.")


def main():
    cli.main()


if __name__ == "__main__":
    main()
