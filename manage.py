import logging
import subprocess
from datetime import timedelta

import click

from resume_builder.app.core.config import get_settings
from resume_builder.app.core.security import create_access_token

log = logging.getLogger(__name__)


def _run_alembic(command: list[str], success_msg: str, failure_prefix: str) -> None:
    try:
        subprocess.run(command, check=True)
        click.echo(success_msg)
        log.info(success_msg)
    except subprocess.CalledProcessError as e:
        _error_msg = f"{failure_prefix}: {e}"
        click.echo(_error_msg, err=True)
        log.exception(_error_msg)
    except FileNotFoundError:
        _error_msg = "Error: 'alembic' command not found. Make sure Alembic is installed and in your PATH."
        click.echo(_error_msg, err=True)
        log.exception(_error_msg)


@click.group()
def cli():
    """Management script for the Resume Builder application."""
    pass


@cli.command("generate-migration")
@click.option(
    "-m",
    "--message",
    required=True,
    help="A short message describing the migration.",
)
def generate_migration(message: str):
    """
    Generate a new database migration script.

    This command wraps 'alembic revision --autogenerate'.

    Args:
        message (str): A short message describing the migration.

    Returns:
        None

    Notes:
        1. Executes the 'alembic revision --autogenerate' command as a subprocess.
        2. On success, prints a success message.
        3. On failure, prints an error message to stderr.

    """
    _msg = "generate_migration starting"
    log.debug(_msg)
    click.echo("Generating new migration...")
    _run_alembic(
        ["alembic", "revision", "--autogenerate", "-m", message],
        f"Successfully generated new migration: {message}",
        "An error occurred while generating migration",
    )
    _msg = "generate_migration returning"
    log.debug(_msg)


@cli.command("apply-migrations")
def apply_migrations():
    """
    Apply all pending migrations to the database.

    This command wraps 'alembic upgrade head'.

    """
    _msg = "apply_migrations starting"
    log.debug(_msg)
    click.echo("Applying database migrations...")
    _run_alembic(
        ["alembic", "upgrade", "head"],
        "Successfully applied all migrations.",
        "An error occurred while applying migrations",
    )
    _msg = "apply_migrations returning"
    log.debug(_msg)


@cli.command("issue-token")
@click.option("--user-id", required=True, help="User identifier to place in the token subject.")
@click.option(
    "--expires-minutes",
    type=int,
    default=None,
    help="Token lifetime; defaults to ACCESS_TOKEN_EXPIRE_MINUTES.",
)
def issue_token(user_id: str, expires_minutes: int | None):
    """
    Print a bearer token for local development.

    Args:
        user_id (str): The value for the token's `sub` claim.
        expires_minutes (int | None): Optional lifetime override.

    Returns:
        None

    Notes:
        1. Signs the token with the configured secret key and algorithm.
        2. Production tokens come from the identity provider, not from this command.

    """
    _msg = "issue_token starting"
    log.debug(_msg)
    settings = get_settings()
    expires_delta = timedelta(minutes=expires_minutes) if expires_minutes else None
    token = create_access_token(
        data={"sub": user_id},
        settings=settings,
        expires_delta=expires_delta,
    )
    click.echo(token)
    _msg = "issue_token returning"
    log.debug(_msg)


def main():
    """Run the command line interface."""
    cli()


if __name__ == "__main__":
    main()
