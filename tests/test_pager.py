import io
import os
import stat

import pytest

from zkutil.logger import StdLogger
from zkutil.opt import NULL_STRING, OptString
from zkutil.pager import (
    PASSTHROUGH_PAGER,
    Pager,
    open_pager,
    select_default_pager,
    select_pager_cmd,
)


def _executable(directory, name):
    path = directory / name
    path.write_text("#!/bin/sh\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return str(path)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    empty = tmp_path / "empty-bin"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    monkeypatch.delenv("ZK_PAGER", raising=False)
    monkeypatch.delenv("PAGER", raising=False)
    monkeypatch.setenv("ZK_SHELL", "/bin/sh")
    return monkeypatch


def test_select_default_pager_prefers_less(clean_env, tmp_path):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    less = _executable(bin_dir, "less")
    _executable(bin_dir, "more")
    clean_env.setenv("PATH", str(bin_dir))
    assert select_default_pager().unwrap() == less + " -FIRX"


def test_select_default_pager_falls_back_to_more(clean_env, tmp_path):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    more = _executable(bin_dir, "more")
    clean_env.setenv("PATH", str(bin_dir))
    assert select_default_pager().unwrap() == more + " -R"


def test_select_default_pager_none_available(clean_env):
    assert select_default_pager().is_null()


def test_select_pager_cmd_precedence(clean_env):
    clean_env.setenv("PAGER", "env-pager")
    assert select_pager_cmd(NULL_STRING).unwrap() == "env-pager"
    assert select_pager_cmd(OptString("user-pager")).unwrap() == "user-pager"
    clean_env.setenv("ZK_PAGER", "zk-pager")
    assert select_pager_cmd(OptString("user-pager")).unwrap() == "zk-pager"


def test_empty_zk_pager_is_ignored(clean_env):
    clean_env.setenv("ZK_PAGER", "")
    assert select_pager_cmd(OptString("user-pager")).unwrap() == "user-pager"
    assert select_pager_cmd(NULL_STRING).is_null()


def test_open_pager_without_pager_is_passthrough(clean_env, capsys):
    pager = open_pager(NULL_STRING, StdLogger())
    assert pager is PASSTHROUGH_PAGER
    pager.write_string("hello")
    pager.close()
    assert capsys.readouterr().out == "hello\n"


def test_pager_to_custom_stream():
    stream = io.StringIO()
    pager = Pager(stream)
    pager.write("a")
    pager.write_string("b")
    pager.close()
    assert stream.getvalue() == "ab\n"


def test_failing_pager_exits(clean_env):
    clean_env.setenv("ZK_PAGER", "exit 3")
    log = io.StringIO()
    pager = open_pager(NULL_STRING, StdLogger(stream=log))
    with pytest.raises(SystemExit) as info:
        pager.close()
    assert info.value.code == 1
    assert "warning: failed to paginate the output" in log.getvalue()
    assert os.environ["ZK_PAGER"] == "exit 3"