"""Global pytest fixtures for todos.

Fixture modules live in ``tests/fixtures`` and are registered here; each
top-level test folder adds its own default mark in its ``conftest.py``.
"""

pytest_plugins = [
    "tests.fixtures.containers",
    "tests.fixtures.sqlite",
    "tests.fixtures.postgres",
    "tests.fixtures.localstack",
    "tests.fixtures.mongo",
]
