"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from urban_feasibility.models import RevenueModel, default_parameters
from tests.fixtures.test_inputs import (
    get_reference_parameters,
    get_reference_technical_result,
    get_rental_parameters,
    get_zero_price_parameters,
)


@pytest.fixture
def default_params():
    """Get the default parameter set."""
    return default_parameters()


@pytest.fixture
def reference_params():
    """Get reference cost and sale-price parameters."""
    return get_reference_parameters()


@pytest.fixture
def zero_price_params():
    """Get reference parameters with zero sale prices."""
    return get_zero_price_parameters()


@pytest.fixture
def rental_params():
    """Get rental-model parameters with zero sale prices."""
    return get_rental_parameters()


@pytest.fixture
def mixed_params():
    """Get mixed-model parameters with zero sale prices."""
    return get_rental_parameters(RevenueModel.MIXED)


@pytest.fixture
def technical_result():
    """Get a technical result with known GFA and unit counts."""
    return get_reference_technical_result()
