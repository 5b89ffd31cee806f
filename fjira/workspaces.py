"""Workspace settings kept in a YAML file inside the fjira configuration directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

EMPTY_WORKSPACE = ""
DEFAULT_WORKSPACE_NAME = "default"
SETTINGS_FILENAME = "fjira.yaml"


class WorkspaceNotFoundError(LookupError):
    """Raised when a workspace is not present in the settings file."""

    def __init__(self, message: str = "workspace doesn't exist") -> None:
        super().__init__(message)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class WorkspaceSettings:
    """Connection settings of a single workspace."""

    jira_rest_url: str = ""
    jira_token: str = ""
    jira_username: str = ""
    jira_token_type: str = ""
    workspace: str = field(default="", compare=False)

    def to_dict(self) -> dict[str, str]:
        return {
            "jiraRestUrl": self.jira_rest_url,
            "jiraToken": self.jira_token,
            "jiraUsername": self.jira_username,
            "jiraTokenType": self.jira_token_type,
        }

    @classmethod
    def from_dict(cls, data: Any) -> WorkspaceSettings:
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"invalid workspace settings: {data!r}")
        return cls(
            jira_rest_url=_text(data.get("jiraRestUrl")),
            jira_token=_text(data.get("jiraToken")),
            jira_username=_text(data.get("jiraUsername")),
            jira_token_type=_text(data.get("jiraTokenType")),
        )


@dataclass
class Settings:
    """The whole settings file: the current workspace and all known workspaces."""

    current: str = ""
    workspaces: dict[str, WorkspaceSettings] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "current": self.current,
            "workspaces": {name: ws.to_dict() for name, ws in self.workspaces.items()},
        }

    @classmethod
    def from_dict(cls, data: Any) -> Settings:
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("settings file must hold a mapping")
        raw_workspaces = data.get("workspaces") or {}
        if not isinstance(raw_workspaces, dict):
            raise ValueError("'workspaces' must be a mapping")
        return cls(
            current=_text(data.get("current")),
            workspaces={
                _text(name): WorkspaceSettings.from_dict(ws)
                for name, ws in raw_workspaces.items()
            },
        )


class SettingsStorage:
    """Reads and writes workspace settings in ``<config_dir>/fjira.yaml``."""

    def __init__(self, config_dir: str | Path) -> None:
        self._config_dir = Path(config_dir)

    def config_dir(self) -> Path:
        """Return the configuration directory, creating it when missing."""
        if not self._config_dir.exists():
            self._config_dir.mkdir()
        return self._config_dir

    def settings_file_path(self) -> Path:
        return self.config_dir() / SETTINGS_FILENAME

    def read(self, workspace: str) -> WorkspaceSettings:
        settings = self._load()
        try:
            found = settings.workspaces[workspace]
        except KeyError:
            raise WorkspaceNotFoundError() from None
        found.workspace = workspace
        return found

    def write(self, workspace: str, workspace_settings: WorkspaceSettings) -> None:
        settings = self._load()
        settings.workspaces[workspace] = workspace_settings
        self._save(settings)

    def read_current_workspace(self) -> str:
        return self._load().current

    def set_current_workspace(self, workspace: str) -> None:
        settings = self._load()
        if workspace not in settings.workspaces:
            raise WorkspaceNotFoundError()
        settings.current = workspace
        self._save(settings)

    def read_all_workspaces(self) -> list[str]:
        return list(self._load().workspaces)

    def _save(self, settings: Settings) -> None:
        text = yaml.safe_dump(settings.to_dict(), sort_keys=False, allow_unicode=True)
        self.settings_file_path().write_text(text, encoding="utf-8")

    def _load(self) -> Settings:
        path = self.settings_file_path()
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return Settings(current=DEFAULT_WORKSPACE_NAME)
        settings = Settings.from_dict(yaml.safe_load(content))
        # An empty workspace name used to mean the default workspace.
        if EMPTY_WORKSPACE in settings.workspaces:
            if settings.current == EMPTY_WORKSPACE:
                settings.current = DEFAULT_WORKSPACE_NAME
            settings.workspaces[DEFAULT_WORKSPACE_NAME] = settings.workspaces.pop(
                EMPTY_WORKSPACE
            )
            try:
                self._save(settings)
            except OSError:
                pass
        return settings


def get_current(storage: SettingsStorage) -> str:
    """Return the current workspace name, falling back to the default one."""
    current = storage.read_current_workspace()
    return current or DEFAULT_WORKSPACE_NAME