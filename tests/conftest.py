import numpy as np
import pytest


def grid_from_string(text):
    return [[int(ch) for ch in text[r * 9:(r + 1) * 9]] for r in range(9)]


CLASSIC = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

CLASSIC_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# 17 givens, exactly one solution
MINIMAL = (
    "050000706"
    "000041000"
    "000030000"
    "000060013"
    "070900000"
    "000000040"
    "000005200"
    "900000000"
    "301000000"
)

MINIMAL_SOLUTION = (
    "154289736"
    "236741589"
    "789536124"
    "592467813"
    "478913652"
    "613852947"
    "847395261"
    "965124378"
    "321678495"
)


@pytest.fixture
def classic():
    return grid_from_string(CLASSIC)


@pytest.fixture
def classic_solution():
    return np.array(grid_from_string(CLASSIC_SOLUTION))


@pytest.fixture
def minimal():
    return grid_from_string(MINIMAL)


@pytest.fixture
def minimal_solution():
    return np.array(grid_from_string(MINIMAL_SOLUTION))


@pytest.fixture
def dead_end():
    """No duplicate givens, but r1c1 has no legal digit."""
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [0, 1, 2, 3, 4, 5, 6, 7, 8]
    grid[1][0] = 9
    return grid


@pytest.fixture
def classic_text():
    return CLASSIC


@pytest.fixture
def classic_solution_text():
    return CLASSIC_SOLUTION
