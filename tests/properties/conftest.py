from pathlib import Path

import pytest


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.property)


@pytest.fixture(scope="module")
def missing_root(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """A directory path that is never created."""
    return tmp_path_factory.mktemp("missing") / "absent"
