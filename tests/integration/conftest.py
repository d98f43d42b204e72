"""Mark every test under `tests/integration/` as `integration`."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

INTEGRATION_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "integration"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the `integration` mark to items collected from this folder."""
    marker = getattr(pytest.mark, MARKER_NAME)
    for item in items:
        if INTEGRATION_ROOT not in item.path.resolve().parents:
            continue
        if item.get_closest_marker(MARKER_NAME) is None:
            item.add_marker(marker)
