"""Tests for the click management commands."""

from unittest.mock import patch

from click.testing import CliRunner
from sqlalchemy import inspect

from showcase.db.session import drop_tables, get_engine
from showcase.manage import DEMOS, cli


def test_demo_list_includes_principles_and_patterns():
    result = CliRunner().invoke(cli, ["demo", "--list"])
    assert result.exit_code == 0
    names = result.output.split()
    assert "srp" in names
    assert "visitor" in names
    assert len(names) == len(DEMOS) == 28


def test_single_demo():
    result = CliRunner().invoke(cli, ["demo", "interpreter"])
    assert result.exit_code == 0
    assert "5 3 + 2 * = 16" in result.output


def test_unknown_demo():
    result = CliRunner().invoke(cli, ["demo", "monad"])
    assert result.exit_code != 0
    assert "Unknown demo 'monad'" in result.output


def test_init_db_creates_tables():
    drop_tables()
    result = CliRunner().invoke(cli, ["init-db", "--reset"])
    assert result.exit_code == 0
    assert {"tasks", "products", "orders"} <= set(inspect(get_engine()).get_table_names())


def test_microservice_uses_default_port():
    with patch("flask.Flask.run") as run:
        result = CliRunner().invoke(cli, ["microservice", "users"])
    assert result.exit_code == 0
    run.assert_called_once_with(host="127.0.0.1", port=8081)


def test_microservice_rejects_unknown_name():
    result = CliRunner().invoke(cli, ["microservice", "billing"])
    assert result.exit_code != 0
