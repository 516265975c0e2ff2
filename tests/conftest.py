import pytest

from fakes import FakeValidator


@pytest.fixture
def validator() -> FakeValidator:
    return FakeValidator()
