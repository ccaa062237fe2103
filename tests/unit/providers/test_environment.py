"""Tests for environment snapshots."""
from providers.environment import EnvironmentSnapshot


def test_snapshot_is_a_copy():
    variables = {"A": "1"}
    env = EnvironmentSnapshot(variables)

    variables["A"] = "2"

    assert env["A"] == "1"
    assert dict(env) == {"A": "1"}


def test_from_os_does_not_follow_later_changes(monkeypatch):
    monkeypatch.setenv("SNAPSHOT_TEST_VAR", "before")
    env = EnvironmentSnapshot.from_os()

    monkeypatch.setenv("SNAPSHOT_TEST_VAR", "after")

    assert env.get("SNAPSHOT_TEST_VAR") == "before"


def test_get_non_blank():
    env = EnvironmentSnapshot({"SET": " value ", "BLANK": " \n", "EMPTY": ""})

    assert env.get_non_blank("SET") == " value "
    assert env.get_non_blank("BLANK") is None
    assert env.get_non_blank("EMPTY") is None
    assert env.get_non_blank("UNSET") is None
