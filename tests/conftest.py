import pytest

from okcolor import GamutTable


@pytest.fixture(scope="session")
def table():
	return GamutTable.shared()
