from zkutil.opt import NULL_STRING, OptString
from zkutil.osenv import environ_map, get_opt_env


def test_get_opt_env_set(monkeypatch):
    monkeypatch.setenv("ZKUTIL_TEST_VAR", "value")
    assert get_opt_env("ZKUTIL_TEST_VAR") == OptString("value")


def test_get_opt_env_empty_is_null(monkeypatch):
    monkeypatch.setenv("ZKUTIL_TEST_VAR", "")
    assert get_opt_env("ZKUTIL_TEST_VAR") == NULL_STRING


def test_get_opt_env_unset_is_null(monkeypatch):
    monkeypatch.delenv("ZKUTIL_TEST_VAR", raising=False)
    assert get_opt_env("ZKUTIL_TEST_VAR").is_null()


def test_environ_map_contains_variable(monkeypatch):
    monkeypatch.setenv("ZKUTIL_TEST_VAR", "a=b")
    env = environ_map()
    assert env["ZKUTIL_TEST_VAR"] == "a=b"


def test_environ_map_is_a_copy(monkeypatch):
    monkeypatch.setenv("ZKUTIL_TEST_VAR", "one")
    env = environ_map()
    env["ZKUTIL_TEST_VAR"] = "changed"
    assert get_opt_env("ZKUTIL_TEST_VAR") == OptString("one")