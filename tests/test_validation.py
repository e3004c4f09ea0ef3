import pytest

from mcp_launcher_config import (
    EmptyCommandError,
    EmptyServerNameError,
    EmptyServerSetError,
    ProjectConfig,
    ServerEntry,
    check_project_config,
    validate_project_config,
)


def test_empty_server_set_rejected():
    with pytest.raises(EmptyServerSetError):
        validate_project_config(ProjectConfig(servers={}))


def test_empty_command_rejected_with_name():
    config = ProjectConfig(servers={"x": ServerEntry(command="")})
    with pytest.raises(EmptyCommandError) as exc_info:
        validate_project_config(config)
    assert exc_info.value.name == "x"
    assert "'x'" in str(exc_info.value)


def test_empty_name_rejected():
    config = ProjectConfig(servers={"": ServerEntry(command="node")})
    with pytest.raises(EmptyServerNameError):
        validate_project_config(config)


def test_empty_name_checked_before_command():
    config = ProjectConfig(servers={"": ServerEntry(command="")})
    with pytest.raises(EmptyServerNameError):
        validate_project_config(config)


def test_minimal_server_accepted():
    config = ProjectConfig(servers={"x": ServerEntry(command="node", args=[], env=None)})
    validate_project_config(config)


def test_args_and_env_unconstrained():
    config = ProjectConfig(
        servers={
            "a": ServerEntry(command="node", args=["", ""], env={}),
            "b": ServerEntry(command="python", env={"": ""}),
        }
    )
    validate_project_config(config)


def test_check_collects_every_failure():
    config = ProjectConfig(
        servers={
            "ok": ServerEntry(command="node"),
            "first": ServerEntry(command=""),
            "second": ServerEntry(command=""),
        }
    )
    result = check_project_config(config)
    assert not result.valid
    assert sorted(e.name for e in result.errors) == ["first", "second"]
    assert "Command for server 'first' cannot be empty" in result.messages


def test_check_empty_set_reports_once():
    result = check_project_config(ProjectConfig(servers={}))
    assert len(result.errors) == 1
    assert isinstance(result.errors[0], EmptyServerSetError)


def test_check_valid_config():
    result = check_project_config(ProjectConfig(servers={"x": ServerEntry(command="node")}))
    assert result.valid
    assert result.messages == []
