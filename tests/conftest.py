"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import pytest

from src.core.config import GameConfig


@pytest.fixture
def config() -> GameConfig:
    """Classical 8x8 setup"""
    return GameConfig()


@pytest.fixture
def small_config() -> GameConfig:
    """Non-standard board: 5 files, 6 ranks, pawns starting on the 2nd and 5th rank"""
    return GameConfig(files=5, ranks=6, white_initial_rank=1, black_initial_rank=4)
