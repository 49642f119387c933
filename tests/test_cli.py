"""Tests for CLI interface."""

import pytest
from unittest.mock import Mock, patch
from click.testing import CliRunner

from github2gogs.api.exceptions import FetchError, MigrateError
from github2gogs.cli.main import cli
from github2gogs.config.config import Config


def make_summary(migrated=None, dry_run=False, to_migrate=0):
    summary = Mock()
    summary.migrated = migrated or []
    summary.dry_run = dry_run
    summary.to_migrate = to_migrate
    return summary


class TestCLI:
    """Test CLI command."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_cli_help(self):
        """Test CLI help."""
        result = self.runner.invoke(cli, ['--help'])

        assert result.exit_code == 0
        assert 'SOURCE_USERNAME' in result.output
        assert '--insecure' in result.output
        assert '--dry-run' in result.output

    def test_cli_version(self):
        """Version prints version and build time and exits with 1."""
        result = self.runner.invoke(cli, ['-version'])

        assert result.exit_code == 1
        assert 'version 0.1.0' in result.output
        assert 'build time' in result.output

    def test_cli_version_double_dash(self):
        result = self.runner.invoke(cli, ['--version'])

        assert result.exit_code == 1
        assert 'version 0.1.0' in result.output

    @pytest.mark.parametrize('args', [[], ['octocat']])
    def test_cli_missing_arguments(self, args):
        """Missing positionals print usage and exit with 1."""
        with patch('github2gogs.cli.main.MigrationEngine') as mock_engine:
            result = self.runner.invoke(cli, args)

        assert result.exit_code == 1
        assert 'Usage' in result.output
        assert 'Example' in result.output
        mock_engine.assert_not_called()

    @patch('github2gogs.cli.main.MigrationEngine')
    def test_cli_migrate_success(self, mock_engine_class):
        """Test successful migration run."""
        mock_engine_class.return_value.migrate.return_value = make_summary(['a', 'c'])

        result = self.runner.invoke(
            cli, ['-token', 'abc', 'octocat', 'https://gogs.example.com/']
        )

        assert result.exit_code == 0
        assert '2 repos migrated' in result.output

        config = mock_engine_class.call_args.args[0]
        assert isinstance(config, Config)
        assert config.source.username == 'octocat'
        assert config.destination.url == 'https://gogs.example.com'
        assert config.destination.token == 'abc'
        assert config.destination.insecure is False
        assert config.migration.dry_run is False

    @patch('github2gogs.cli.main.MigrationEngine')
    def test_cli_token_from_environment(self, mock_engine_class):
        mock_engine_class.return_value.migrate.return_value = make_summary()

        result = self.runner.invoke(
            cli,
            ['octocat', 'https://gogs.example.com'],
            env={'GOGS_TOKEN': 'from-env'},
        )

        assert result.exit_code == 0
        config = mock_engine_class.call_args.args[0]
        assert config.destination.token == 'from-env'

    @patch('github2gogs.cli.main.MigrationEngine')
    def test_cli_insecure_and_dry_run(self, mock_engine_class):
        mock_engine_class.return_value.migrate.return_value = make_summary(
            dry_run=True, to_migrate=4
        )

        result = self.runner.invoke(
            cli, ['--insecure', '--dry-run', 'octocat', 'https://gogs.example.com']
        )

        assert result.exit_code == 0
        assert 'dry-run mode' in result.output
        assert '4 repos would be migrated' in result.output
        config = mock_engine_class.call_args.args[0]
        assert config.destination.insecure is True
        assert config.migration.dry_run is True

    @patch('github2gogs.cli.main.MigrationEngine')
    def test_cli_fetch_failure_exits_nonzero(self, mock_engine_class):
        """Pipeline errors go to stderr with exit status 1."""
        mock_engine_class.return_value.migrate.side_effect = FetchError(
            '401 Unauthorized', status_code=401
        )

        result = self.runner.invoke(cli, ['octocat', 'https://gogs.example.com'])

        assert result.exit_code == 1
        assert 'Migration failed' in result.output
        assert '401 Unauthorized' in result.output

    @patch('github2gogs.cli.main.MigrationEngine')
    def test_cli_migrate_failure_exits_nonzero(self, mock_engine_class):
        mock_engine_class.return_value.migrate.side_effect = MigrateError(
            '500 Internal Server Error'
        )

        result = self.runner.invoke(cli, ['octocat', 'https://gogs.example.com'])

        assert result.exit_code == 1
        assert '500 Internal Server Error' in result.output

    def test_cli_invalid_destination_url(self):
        """Bad URLs are rejected before any request."""
        with patch('github2gogs.cli.main.MigrationEngine') as mock_engine:
            result = self.runner.invoke(cli, ['octocat', 'gogs.example.com'])

        assert result.exit_code == 1
        assert 'Invalid configuration' in result.output
        mock_engine.assert_not_called()

    @patch('github2gogs.cli.main.MigrationEngine')
    def test_cli_config_file(self, mock_engine_class, tmp_path):
        """File settings apply and command line values win."""
        config_file = tmp_path / 'config.yaml'
        config_file.write_text(
            'source:\n'
            '  api_url: https://github.example.com/api/v3\n'
            '  per_page: 20\n'
            'destination:\n'
            '  url: https://ignored.example.com\n'
            '  token: file-token\n'
            '  insecure: true\n'
            'logging:\n'
            '  level: warning\n'
        )
        mock_engine_class.return_value.migrate.return_value = make_summary()

        result = self.runner.invoke(
            cli,
            ['--config', str(config_file), 'octocat', 'https://gogs.example.com'],
        )

        assert result.exit_code == 0
        config = mock_engine_class.call_args.args[0]
        assert config.source.api_url == 'https://github.example.com/api/v3'
        assert config.source.per_page == 20
        assert config.destination.url == 'https://gogs.example.com'
        assert config.destination.token == 'file-token'
        assert config.destination.insecure is True
        assert config.logging.level == 'WARNING'

    def test_cli_config_file_unknown_key(self, tmp_path):
        config_file = tmp_path / 'config.yaml'
        config_file.write_text('unknown: 1\n')

        with patch('github2gogs.cli.main.MigrationEngine') as mock_engine:
            result = self.runner.invoke(
                cli,
                ['--config', str(config_file), 'octocat', 'https://gogs.example.com'],
            )

        assert result.exit_code == 1
        assert 'Invalid configuration' in result.output
        mock_engine.assert_not_called()
