"""Jira user lookup: formatting, fetching and typeahead searching."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

TYPEAHEAD_SEARCH_THRESHOLD = 100
ALL_USERS_LABEL = "All"


@dataclass
class User:
    """A Jira user."""

    account_id: str = ""
    display_name: str = ""
    email_address: str = ""


class UsersApi(Protocol):
    def find_users_with_query(self, project_key: str, query: str) -> list[User]: ...


def format_jira_user(user: User) -> str:
    return f"{user.display_name} <{user.email_address}>"


def format_jira_users(users: Iterable[User]) -> list[str]:
    return [format_jira_user(user) for user in users]


class ApiRecordsProvider:
    """Fetches users from the API, reporting failures through ``on_error``.

    When no ``on_error`` callback is given, API errors propagate.
    """

    def __init__(self, api: UsersApi, on_error: Callable[[str], None] | None = None) -> None:
        self.api = api
        self.on_error = on_error

    def fetch_users(self, project_key: str, query: str) -> list[User]:
        try:
            return list(self.api.find_users_with_query(project_key, query) or [])
        except Exception as err:
            if self.on_error is None:
                raise
            self.on_error(str(err))
            return []


class UserTypeahead:
    """Searches users through the API until the result set is small enough.

    Once a previous search returned fewer than ``TYPEAHEAD_SEARCH_THRESHOLD``
    users, extending the query reuses those users so the caller can narrow
    them down locally. An ``All`` entry is always appended to fetched users.
    """

    def __init__(
        self,
        project_key: str,
        provider: ApiRecordsProvider,
        on_loading: Callable[[bool], None] | None = None,
    ) -> None:
        self.project_key = project_key
        self.provider = provider
        self.on_loading = on_loading
        self.users: list[User] = []
        self._prev_query = ""

    def _loading(self, state: bool) -> None:
        if self.on_loading is not None:
            self.on_loading(state)

    def search(self, query: str) -> list[str]:
        if (
            0 < len(self.users) < TYPEAHEAD_SEARCH_THRESHOLD
            and len(query) > len(self._prev_query)
        ):
            return format_jira_users(self.users)
        self._prev_query = query
        self._loading(True)
        try:
            fetched = self.provider.fetch_users(self.project_key, query)
        finally:
            self._loading(False)
        self.users = [*fetched, User(display_name=ALL_USERS_LABEL)]
        return format_jira_users(self.users)