[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fjira"
version = "0.1.0"
description = "Workspace settings storage and user typeahead helpers for a Jira terminal client"
requires-python = ">=3.10"
keywords = ["jira", "workspaces", "settings", "typeahead", "issue-tracker"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Bug Tracking",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fjira"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
