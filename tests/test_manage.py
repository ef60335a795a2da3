import logging
import subprocess
from unittest.mock import patch

from click.testing import CliRunner
from jose import jwt

from manage import cli
from resume_builder.app.core.config import get_settings

log = logging.getLogger(__name__)


def test_generate_migration_success():
    """Test the generate-migration command successfully generates a migration."""
    runner = CliRunner()
    with patch("subprocess.run") as mock_run:
        result = runner.invoke(cli, ["generate-migration", "-m", "add links"])
        assert result.exit_code == 0
        assert "Generating new migration..." in result.output
        assert "Successfully generated new migration: add links" in result.output
        mock_run.assert_called_once_with(
            ["alembic", "revision", "--autogenerate", "-m", "add links"], check=True
        )


def test_generate_migration_called_process_error():
    """Test the generate-migration command handles CalledProcessError."""
    runner = CliRunner()
    with patch("subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(1, "cmd")
        result = runner.invoke(cli, ["generate-migration", "-m", "add links"])
        assert result.exit_code == 0
        assert "An error occurred while generating migration:" in result.output


def test_generate_migration_missing_message():
    """Test the generate-migration command fails if the message is missing."""
    runner = CliRunner()
    result = runner.invoke(cli, ["generate-migration"])
    assert result.exit_code != 0
    assert "--message" in result.output


def test_apply_migrations_success():
    """Test the apply-migrations command successfully applies migrations."""
    runner = CliRunner()
    with patch("subprocess.run") as mock_run:
        result = runner.invoke(cli, ["apply-migrations"])
        assert result.exit_code == 0
        assert "Successfully applied all migrations." in result.output
        mock_run.assert_called_once_with(["alembic", "upgrade", "head"], check=True)


def test_apply_migrations_alembic_missing():
    """Test the apply-migrations command handles a missing alembic executable."""
    runner = CliRunner()
    with patch("subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError
        result = runner.invoke(cli, ["apply-migrations"])
        assert result.exit_code == 0
        assert "'alembic' command not found" in result.output


def test_issue_token_prints_decodable_token():
    runner = CliRunner()
    result = runner.invoke(cli, ["issue-token", "--user-id", "user-9"])

    assert result.exit_code == 0
    settings = get_settings()
    payload = jwt.decode(result.output.strip(), settings.secret_key, algorithms=[settings.algorithm])
    assert payload["sub"] == "user-9"


def test_issue_token_requires_user_id():
    result = CliRunner().invoke(cli, ["issue-token"])

    assert result.exit_code != 0
    assert "--user-id" in result.output
