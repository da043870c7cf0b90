import pytest

from randprime.backends import GmpBackend


class FixedCandidate(GmpBackend):
    """GMP backend whose random source always yields `value`."""
    name = "fixed"

    def __init__(self, value: int):
        super().__init__(0)
        self.value = value
        self.requested = []

    def random_bits(self, n: int) -> int:
        self.requested.append(n)
        return self.value


@pytest.fixture
def fixed():
    return FixedCandidate
