"""
# Provide contention &proleptic.harness.Test instances to pytest collected tests.
"""
import pytest
from proleptic import harness

@pytest.fixture(name='test')
def contention(request):
	return harness.Test(request.node.name, request.function)
