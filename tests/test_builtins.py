import io
import os

import pytest

from minishellkit.builtins import (
    ShellExit,
    ShellState,
    cd,
    echo,
    env,
    exit_builtin,
    export,
    pwd,
    unset,
)
from minishellkit.environment import Environment


def make_state(envp=("PATH=/bin", "USER=tester")):
    return ShellState.from_envp(list(envp), io.StringIO(), io.StringIO())


def test_from_envp_copies_are_independent():
    state = make_state()
    state.env.set("NEW", "1")
    assert "NEW" in state.env
    assert "NEW" not in state.exported
    assert state.env.get("USER") == "tester"
    assert state.exported.get("USER") == "tester"


def test_echo_joins_arguments():
    state = make_state()
    assert echo(["hello", "world"], state) == 0
    assert state.out.getvalue() == "hello world\n"


def test_echo_repeated_n_suppresses_newline():
    state = make_state()
    echo(["-n", "-n", "hi", "there"], state)
    assert state.out.getvalue() == "hi there"


def test_echo_only_exact_n_is_an_option():
    state = make_state()
    echo(["-nn", "x"], state)
    assert state.out.getvalue() == "-nn x\n"


def test_echo_without_arguments_prints_newline():
    state = make_state()
    echo([], state)
    assert state.out.getvalue() == "\n"


def test_exit_without_arguments():
    state = make_state()
    with pytest.raises(ShellExit) as info:
        exit_builtin([], state)
    assert info.value.status == 0
    assert state.out.getvalue() == "exit\n"


def test_exit_with_number():
    state = make_state()
    with pytest.raises(ShellExit) as info:
        exit_builtin(["42"], state)
    assert info.value.status == 42
    assert state.status == 42


def test_exit_with_negative_number():
    state = make_state()
    with pytest.raises(ShellExit) as info:
        exit_builtin(["-5"], state)
    assert info.value.status == 156


@pytest.mark.parametrize("argument", ["abc", "12a", "9223372036854775808", "+"])
def test_exit_with_non_numeric_argument(argument):
    state = make_state()
    with pytest.raises(ShellExit) as info:
        exit_builtin([argument], state)
    assert info.value.status == 2
    assert state.out.getvalue() == (
        f"exit\nbash: exit: {argument}: numeric argument required\n"
    )


def test_exit_with_too_many_arguments_does_not_leave():
    state = make_state()
    assert exit_builtin(["1", "2"], state) == 1
    assert state.err.getvalue() == " too many arguments\n"
    assert state.out.getvalue() == ""


def test_export_lists_without_arguments():
    state = make_state()
    assert export([], state) == 0
    assert state.out.getvalue() == (
        'declare -x PATH="/bin"\ndeclare -x USER="tester"\n'
    )


def test_export_sets_value_in_both():
    state = make_state()
    assert export(["A=1"], state) == 0
    assert state.env.get("A") == "1"
    assert state.exported.get("A") == "1"


def test_export_plus_equal_appends():
    state = make_state()
    export(["USER+=_x"], state)
    assert state.env.get("USER") == "tester_x"
    assert state.exported.get("USER") == "tester_x"


def test_export_name_without_value_only_in_exported():
    state = make_state()
    export(["B"], state)
    assert "B" not in state.env
    assert state.exported.get("B") == ""


def test_export_invalid_identifier():
    state = make_state()
    assert export(["1A=x"], state) == 1
    assert state.err.getvalue() == "minishell: export: 1A=x: not a valid identifier\n"
    assert "1A" not in state.env


def test_export_stops_at_first_invalid():
    state = make_state()
    export(["X=1", "9=", "Y=2"], state)
    assert state.env.get("X") == "1"
    assert "Y" not in state.env
    assert state.status == 1


def test_unset_removes_from_both():
    state = make_state()
    unset(["USER", "MISSING"], state)
    assert "USER" not in state.env
    assert "USER" not in state.exported
    assert state.env.get("PATH") == "/bin"


def test_env_prints_entries():
    state = make_state()
    assert env(state) == 0
    assert state.out.getvalue() == "PATH=/bin\nUSER=tester\n"


def test_pwd_prints_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    state = make_state()
    assert pwd(state) == 0
    assert state.out.getvalue() == os.getcwd() + "\n"


def test_cd_updates_pwd_and_oldpwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    start = os.getcwd()
    target = tmp_path / "sub"
    target.mkdir()
    state = make_state()
    assert cd([str(target)], state) == 0
    assert os.getcwd() == os.path.realpath(target)
    assert state.env.get("OLDPWD") == start
    assert state.env.get("PWD") == os.getcwd()
    assert state.exported.get("PWD") == os.getcwd()


def test_cd_without_arguments_goes_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    home.mkdir()
    state = make_state(["HOME=" + str(home)])
    assert cd([], state) == 0
    assert os.getcwd() == os.path.realpath(home)


def test_cd_without_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    state = make_state()
    assert cd([], state) == 1
    assert state.err.getvalue() == "Minishell: cd: HOME not set\n"


def test_cd_too_many_arguments(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    state = make_state()
    assert cd(["a", "b"], state) == 1
    assert os.getcwd() == os.path.realpath(tmp_path)


def test_cd_missing_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    state = make_state()
    missing = str(tmp_path / "nope")
    assert cd([missing], state) == 1
    assert "No such file or directory" in state.err.getvalue()
    assert "OLDPWD" not in state.env
    assert os.getcwd() == os.path.realpath(tmp_path)


def test_shell_state_defaults_exported_to_copy():
    environment = Environment.from_envp(["K=v"])
    state = ShellState(environment)
    state.exported.set("K", "w")
    assert environment.get("K") == "v"
    assert state.exported.get("K") == "w"