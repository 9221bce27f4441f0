"""
Pytest fixtures for array and view tests.
"""

import pytest

from ndcore import Config, Shape, int32


@pytest.fixture(autouse=True)
def reset_config():
    """Restore default configuration after every test."""
    yield
    Config.reset()


@pytest.fixture
def shape_3x10x1():
    """Shape with a trailing unit axis."""
    return Shape(3, 10, 1)


@pytest.fixture
def empty_shape():
    """Shape with a zero extent."""
    return Shape(5, 0)


@pytest.fixture
def zeros_2x2():
    """Zero-filled 2x2 int32 array."""
    return int32(Shape(2, 2))


@pytest.fixture
def ones_5x8x6():
    """One-filled 5x8x6 int32 array."""
    return int32(Shape(5, 8, 6), fill=1)


@pytest.fixture
def arange_4x6():
    """4x6 int32 array holding its own flat offsets."""
    a = int32(Shape(4, 6))
    for i in range(a.size):
        a[i] = i
    return a
