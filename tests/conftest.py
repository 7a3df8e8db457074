"""
Pytest configuration and shared fixtures for biip tests.

Factories are exercised against plain dictionaries instead of the real
process environment, so no test needs to set or unset variables.
"""

import os
import sys

import pytest

# Add parent directory to path for package imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def environ():
    """A fake environment for an 'awesome-user' with one secret."""
    return {
        "USER": "awesome-user",
        "HOME": "/home/awesome-user",
        "MY_SECRET": "my-awesome-secret",
        "SHELL": "/bin/bash",
    }


@pytest.fixture
def empty_environ():
    """An environment that gives the user-specific factories nothing to use."""
    return {}
