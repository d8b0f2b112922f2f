import pytest

from commonkit.versions import add_version, new_asset


@pytest.fixture
def single_asset():
    return new_asset("logo", {"shape": "circle"}, modified_time=1)


@pytest.fixture
def two_version_asset(single_asset):
    """Versions at times 1 and 2, with 1 current."""
    asset = add_version(single_asset, {"shape": "square", "modified_time": 2})
    return {**asset, "current": 1}


@pytest.fixture
def catalog(two_version_asset):
    return {"logo": two_version_asset}
