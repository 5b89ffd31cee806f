"""Workspace settings storage and Jira user typeahead helpers."""

__version__ = "0.1.0"
__all__ = ["users", "workspaces"]