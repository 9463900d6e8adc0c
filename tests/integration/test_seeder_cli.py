#!/usr/bin/env python3
"""
Integration tests for the umami-content CLI.

Tests init, import, status, delete and reset against a temporary database.
"""
import json

import pytest
from click.testing import CliRunner

from umami_content.cli import cli


class TestSeederCLI:
    """Test CLI commands with a temporary database."""

    @pytest.fixture
    def runner(self):
        """Create Click test runner."""
        return CliRunner()

    @pytest.fixture
    def test_dirs(self, tmp_path):
        """Temporary locations for everything the CLI writes."""
        return {
            "db_path": tmp_path / "test.db",
            "alembic_dir": tmp_path / "alembic",
            "files_dir": tmp_path / "files",
            "log_dir": tmp_path / "logs",
        }

    def invoke_cli(self, runner, test_dirs, args, **kwargs):
        """Helper to invoke CLI with test configuration."""
        base_args = [
            "--db-path", str(test_dirs["db_path"]),
            "--alembic-dir", str(test_dirs["alembic_dir"]),
            "--files-dir", str(test_dirs["files_dir"]),
            "--log-dir", str(test_dirs["log_dir"]),
        ]
        return runner.invoke(cli, base_args + args, **kwargs)

    def test_cli_help(self, runner):
        """Test that CLI help message works."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "import" in result.output
        assert "delete" in result.output

    def test_init_command(self, runner, test_dirs):
        """Test 'init' creates the database and Alembic environment."""
        result = self.invoke_cli(runner, test_dirs, ["init"])

        assert result.exit_code == 0, result.output
        assert "Initializing Alembic" in result.output
        assert "Initializing database schema" in result.output
        assert "Complete setup finished" in result.output
        assert test_dirs["db_path"].exists()
        assert (test_dirs["alembic_dir"] / "env.py").exists()

    def test_import_status_delete_cycle(self, runner, test_dirs):
        """Import, inspect and delete the bundled content."""
        result = self.invoke_cli(runner, test_dirs, ["import"])
        assert result.exit_code == 0, result.output
        assert "Import Complete" in result.output
        assert "node: 9 created" in result.output
        assert "block_content: 3 created" in result.output
        assert (test_dirs["files_dir"] / "banner.png").is_file()

        result = self.invoke_cli(runner, test_dirs, ["status"])
        assert result.exit_code == 0, result.output
        assert "Ledger: umami_content_uuids" in result.output
        assert "taxonomy_term: 7" in result.output
        assert "Total: 27" in result.output

        result = self.invoke_cli(runner, test_dirs, ["delete", "--yes"])
        assert result.exit_code == 0, result.output
        assert "Deletion Complete" in result.output
        assert "user: 3 deleted" in result.output

        result = self.invoke_cli(runner, test_dirs, ["status"])
        assert "No imported content recorded" in result.output
        assert not (test_dirs["files_dir"] / "banner.png").exists()

    def test_import_twice_fails(self, runner, test_dirs):
        """A second import is refused until the content is deleted."""
        self.invoke_cli(runner, test_dirs, ["import"])

        result = self.invoke_cli(runner, test_dirs, ["import"])

        assert result.exit_code == 1
        assert "ContentAlreadyImportedError" in result.output

    def test_import_json(self, runner, test_dirs):
        """--json prints the import statistics."""
        result = self.invoke_cli(runner, test_dirs, ["import", "--json"])

        assert result.exit_code == 0, result.output
        stats = json.loads(result.stdout)
        assert stats["created"]["file"] == 5
        assert stats["rows_processed"] == 9

    def test_status_json(self, runner, test_dirs):
        self.invoke_cli(runner, test_dirs, ["import"])

        result = self.invoke_cli(runner, test_dirs, ["status", "--json"])

        data = json.loads(result.stdout)
        assert data["ledger_key"] == "umami_content_uuids"
        assert data["counts"]["user"] == 3

    def test_delete_with_empty_ledger(self, runner, test_dirs):
        result = self.invoke_cli(runner, test_dirs, ["delete", "--yes"])
        assert result.exit_code == 0, result.output
        assert "Nothing to delete" in result.output

    def test_delete_requires_confirmation(self, runner, test_dirs):
        self.invoke_cli(runner, test_dirs, ["import"])

        result = self.invoke_cli(runner, test_dirs, ["delete"], input="n\n")

        assert result.exit_code != 0
        status = self.invoke_cli(runner, test_dirs, ["status"])
        assert "Total: 27" in status.output

    def test_skip_bad_rows(self, runner, test_dirs, content_dir):
        """Malformed rows abort by default and are skipped on request."""
        with open(content_dir / "pages.csv", "a", encoding="utf-8") as handle:
            handle.write("Broken row\n")

        result = self.invoke_cli(
            runner, test_dirs, ["import", "--content-dir", str(content_dir)]
        )
        assert result.exit_code == 1
        assert "RowMappingError" in result.output

        # Editors, articles and press releases were committed before pages failed
        self.invoke_cli(runner, test_dirs, ["delete", "--yes"])

        result = self.invoke_cli(
            runner,
            test_dirs,
            ["import", "--content-dir", str(content_dir), "--skip-bad-rows"],
        )
        assert result.exit_code == 0, result.output
        assert "1 rows skipped" in result.output

    def test_undecodable_data_file_is_skipped(self, runner, test_dirs, content_dir):
        (content_dir / "press-releases.csv").write_bytes(
            b"title,body,slug,author,state\nCaf\xe9 opening,,press/cafe,,\n"
        )

        result = self.invoke_cli(
            runner, test_dirs, ["import", "--content-dir", str(content_dir)]
        )

        assert result.exit_code == 0, result.output
        assert "Traceback" not in result.output
        assert "1 data files missing or unreadable" in result.output

    def test_config_file(self, runner, test_dirs, tmp_path):
        """Settings from --config are applied."""
        config = tmp_path / "seeder.yaml"
        config.write_text("ledger_key: staging_uuids\nemail_domain: umami.test\n", encoding="utf-8")

        self.invoke_cli(runner, test_dirs, ["--config", str(config), "import"])
        result = self.invoke_cli(runner, test_dirs, ["--config", str(config), "status"])

        assert "Ledger: staging_uuids" in result.output
        assert "Total: 27" in result.output

        default = self.invoke_cli(runner, test_dirs, ["status"])
        assert "No imported content recorded" in default.output

    def test_invalid_config_file(self, runner, test_dirs, tmp_path):
        config = tmp_path / "seeder.yaml"
        config.write_text("colour: red\n", encoding="utf-8")

        result = self.invoke_cli(runner, test_dirs, ["--config", str(config), "status"])

        assert result.exit_code == 1
        assert "ValidationError" in result.output

    def test_reset_command(self, runner, test_dirs):
        """'reset' recreates an empty database and can purge files."""
        self.invoke_cli(runner, test_dirs, ["import"])

        result = self.invoke_cli(runner, test_dirs, ["reset", "--yes", "--purge-files"])

        assert result.exit_code == 0, result.output
        assert "Database reset complete" in result.output
        assert not test_dirs["files_dir"].exists()
        status = self.invoke_cli(runner, test_dirs, ["status"])
        assert "No imported content recorded" in status.output
