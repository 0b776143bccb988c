import pytest

def pytest_addoption(parser):
    parser.addoption("--quick", action="store_true",
                     default=False, help="skip slow tests")


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: large inputs, skipped with --quick")


@pytest.fixture
def slow(request):
    """Marks a test as slow, so that --quick skips it"""
    if request.config.getoption("--quick"):
        pytest.skip("slow test skipped by --quick")
