"""Test fixtures and utilities"""

import pytest

from math3d import UNIT_X, UNIT_Y, UNIT_Z


#################################################################
# Fixtures
#################################################################
@pytest.fixture(params=[UNIT_X, UNIT_Y, UNIT_Z], ids=["x", "y", "z"])
def unit_vector(request):
    return request.param
