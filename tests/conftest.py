import os
import sys

# Add src to path so tests can run without installing package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import pytest


@pytest.fixture
def sample_keys():
    """A mix of small, negative and boundary keys."""
    return list(range(-50, 200)) + [
        2147483647,
        -2147483648,
        0xFFFFFFFF,
        123456789,
        -987654321,
    ]


@pytest.fixture
def golden_hashes():
    """Hand-computed FNV-1a values over the four key bytes, low byte first."""
    return {
        0: 0x4B95F515,
        1: 0xFB69B604,
        -1: 0xE3160FB1,
        2147483647: 0x6316D931,
        -2147483648: 0xCB952B95,
        42: 0x72D84DDF,
        7: 0x5B1137E2,
    }
