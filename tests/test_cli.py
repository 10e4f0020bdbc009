"""Tests for the people example CLI."""
import pytest
from recordstore.cli.people_cli import main, open_people, Person


@pytest.fixture
def cli_args(store_paths):
    """Common file options pointing into a temporary directory."""
    data_path, index_path = store_paths
    return ['--data-file', data_path, '--index-file', index_path]


class TestPeopleCLI:
    """Test the people CLI commands."""

    def test_demo(self, cli_args, capsys):
        """Test the demo inserts Bob and prints his name."""
        assert main(cli_args + ['demo']) == 0
        assert capsys.readouterr().out.strip() == "Bob"

    def test_insert_and_get(self, cli_args, capsys):
        """Test insert followed by get in separate invocations."""
        assert main(cli_args + ['insert', '1', '10', 'Bob']) == 0
        assert main(cli_args + ['get', '1']) == 0

        out = capsys.readouterr().out.splitlines()
        assert out == ["OK", "1: age=10 name=Bob"]

    def test_insert_duplicate(self, cli_args, capsys):
        """Test a duplicate insert reports ERROR and keeps the first value."""
        main(cli_args + ['insert', '1', '10', 'Bob'])
        assert main(cli_args + ['insert', '1', '50', 'Eve']) == 1

        out = capsys.readouterr().out.splitlines()
        assert out == ["OK", "ERROR"]

    def test_get_missing(self, cli_args, capsys):
        """Test get on an unknown key."""
        assert main(cli_args + ['get', '42']) == 1
        assert capsys.readouterr().out.strip() == "NOT_FOUND"

    def test_delete(self, cli_args, store_paths, capsys):
        """Test delete removes the record for later invocations."""
        main(cli_args + ['insert', '1', '10', 'Bob'])
        assert main(cli_args + ['delete', '1']) == 0
        assert main(cli_args + ['delete', '1']) == 1

        assert capsys.readouterr().out.splitlines() == ["OK", "OK", "NOT_FOUND"]
        with open_people(*store_paths) as store:
            assert 1 not in store

    def test_insert_requires_name(self, cli_args, capsys):
        """Test insert without age and name."""
        assert main(cli_args + ['insert', '1']) == 1
        assert "requires age and name" in capsys.readouterr().out

    def test_command_requires_key(self, cli_args, capsys):
        """Test get without a key."""
        assert main(cli_args + ['get']) == 1
        assert "requires a key" in capsys.readouterr().out

    def test_records_readable_from_library(self, cli_args, store_paths):
        """Test records written by the CLI through the library API."""
        main(cli_args + ['insert', '3', '33', 'Carol'])
        with open_people(*store_paths) as store:
            assert store.retrieve(3) == Person(33, "Carol")
