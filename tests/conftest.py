"""
Shared fixtures.
"""

import pytest

from elimcore.core.config import invariant_mode


@pytest.fixture(autouse=True)
def validated_mode():
    """Run every test with invariant checking on, whatever the environment says."""
    with invariant_mode("validated"):
        yield
