import pytest
import yaml

from fjira.workspaces import (
    Settings,
    SettingsStorage,
    WorkspaceNotFoundError,
    WorkspaceSettings,
    get_current,
)


@pytest.fixture
def storage(tmp_path):
    return SettingsStorage(tmp_path / "config")


def _sample():
    return WorkspaceSettings(
        jira_rest_url="http://test", jira_username="test_user", jira_token="token"
    )


@pytest.mark.parametrize("workspace", ["test2", "test3"])
def test_write_creates_settings_file(storage, workspace):
    path = storage.settings_file_path()
    assert not path.exists()
    storage.write(workspace, _sample())
    assert path.is_file()


@pytest.mark.parametrize("workspace", ["test2"])
def test_read_missing_workspace_raises(storage, workspace):
    assert not storage.settings_file_path().exists()
    with pytest.raises(WorkspaceNotFoundError):
        storage.read(workspace)


def test_config_dir_is_created(tmp_path):
    target = tmp_path / "fresh"
    s = SettingsStorage(target)
    assert s.config_dir() == target
    assert target.is_dir()


def test_settings_file_name(storage):
    assert storage.settings_file_path().name == "fjira.yaml"


def test_write_then_read_round_trip(storage):
    storage.write("work", _sample())
    result = storage.read("work")
    assert result == _sample()
    assert result.workspace == "work"
    assert result.jira_rest_url == "http://test"


def test_file_uses_yaml_keys(storage):
    storage.write("work", _sample())
    data = yaml.safe_load(storage.settings_file_path().read_text())
    assert data["current"] == "default"
    assert data["workspaces"]["work"]["jiraRestUrl"] == "http://test"
    assert data["workspaces"]["work"]["jiraUsername"] == "test_user"


def test_current_defaults_when_no_file(storage):
    assert storage.read_current_workspace() == "default"
    assert get_current(storage) == "default"


def test_set_current_workspace(storage):
    storage.write("a", _sample())
    storage.write("b", _sample())
    storage.set_current_workspace("b")
    assert storage.read_current_workspace() == "b"
    assert get_current(storage) == "b"


def test_set_current_missing_workspace_raises(storage):
    storage.write("a", _sample())
    with pytest.raises(WorkspaceNotFoundError):
        storage.set_current_workspace("missing")
    assert storage.read_current_workspace() == "default"


def test_read_all_workspaces(storage):
    assert storage.read_all_workspaces() == []
    storage.write("a", _sample())
    storage.write("b", _sample())
    assert sorted(storage.read_all_workspaces()) == ["a", "b"]


def test_empty_workspace_name_migrates_to_default(storage):
    legacy = {
        "current": "",
        "workspaces": {"": {"jiraRestUrl": "http://old", "jiraToken": "token"}},
    }
    storage.settings_file_path().write_text(yaml.safe_dump(legacy))
    assert storage.read_all_workspaces() == ["default"]
    assert storage.read("default").jira_rest_url == "http://old"
    saved = yaml.safe_load(storage.settings_file_path().read_text())
    assert saved["current"] == "default"
    assert list(saved["workspaces"]) == ["default"]


def test_get_current_empty_value_falls_back(storage):
    storage.settings_file_path().write_text(yaml.safe_dump({"current": "", "workspaces": {}}))
    assert storage.read_current_workspace() == ""
    assert get_current(storage) == "default"


def test_settings_from_dict_rejects_non_mapping():
    with pytest.raises(ValueError):
        Settings.from_dict(["not", "a", "mapping"])