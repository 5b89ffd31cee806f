# fjira

Helpers for a Jira terminal client. The package has two modules:

- `fjira.workspaces` keeps named workspaces in a YAML file.
- `fjira.users` formats Jira users and runs a typeahead search over them.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Workspaces

`SettingsStorage` keeps every workspace in one `fjira.yaml` file inside the
configuration directory you give it. When that directory does not exist, the
storage creates it. It creates only the last directory, not missing parents.

```python
from fjira.workspaces import SettingsStorage, WorkspaceSettings, get_current

storage = SettingsStorage("/home/me/.fjira")
storage.write(
    "work",
    WorkspaceSettings(
        jira_rest_url="https://jira.example.com",
        jira_username="me@example.com",
        jira_token="token",
    ),
)

storage.set_current_workspace("work")
print(storage.read_all_workspaces())   # ['work']
print(get_current(storage))            # 'work'

settings = storage.read("work")
print(settings.jira_rest_url)          # 'https://jira.example.com'
print(settings.workspace)              # 'work'
```

The methods behave as follows:

- `read` and `set_current_workspace` raise `WorkspaceNotFoundError` for an
  unknown workspace. `WorkspaceNotFoundError` is a subclass of `LookupError`.
- `read_current_workspace` returns `"default"` when the settings file does
  not exist yet.
- `get_current(storage)` returns the current workspace name. If that name is
  empty, it returns `"default"`.
- `settings_file_path` returns the path of the settings file.

The file holds a `current` key and a `workspaces` mapping. Each workspace
entry has `jiraRestUrl`, `jiraToken`, `jiraUsername` and `jiraTokenType`.

Older files sometimes stored the default workspace under an empty name. On
read, the storage moves that entry to `default` and writes the file back.

## Users

`format_jira_user(user)` renders a `User` as `Display Name <email>`.
`format_jira_users(users)` does the same for each user in a list.

`ApiRecordsProvider` wraps an API object. That object must have a
`find_users_with_query(project_key, query)` method that returns `User`
objects. By default an error from the API propagates to the caller. If you
pass an `on_error` callback, the provider calls it with the error message
and returns an empty list instead.

`UserTypeahead.search(query)` returns the formatted users for a query. It
works like this:

- It keeps the last fetched list in `typeahead.users`. That list always ends
  with an extra user whose display name is `All`.
- It calls the API again unless both of these hold:
  - the kept list has fewer than 100 entries, counting the `All` entry;
  - the new query is longer than the last query sent to the API.
- When both hold, it returns the kept list unchanged, so the caller can
  narrow it down locally.
- The optional `on_loading` callback is called with `True` before each API
  request and with `False` after it.

```python
from fjira.users import ApiRecordsProvider, UserTypeahead

provider = ApiRecordsProvider(api, on_error=print)
typeahead = UserTypeahead("ABC", provider)
print(typeahead.search("bo"))
print(typeahead.users)
```

## What this package does not do

This package has no Jira HTTP client. You supply the object that finds
users.

It also does not provide:

- a terminal interface or screens;
- a command-line program;
- issue viewing or assignment;
- fuzzy matching.

It stores workspace settings and prepares user search results. Displaying
them and acting on them is up to the caller.