import random

import pytest


def pytest_report_header():
    return "pytest-%s from %s" %(pytest.__version__, pytest.__file__)

def pytest_addoption(parser):
    group = parser.getgroup("limbint options")
    group.addoption('--random-seed', action="store", dest="random_seed",
                    type=int, default=None,
           help="seed for the randomized arithmetic tests")

@pytest.fixture
def rng(request):
    seed = request.config.getoption("random_seed")
    if seed is None:
        seed = random.randrange(1 << 32)
    print("random seed: %d" % (seed,))
    return random.Random(seed)

@pytest.fixture
def bigint_config():
    """Install a fresh engine config for the duration of one test."""
    from limbint.config.bigintoption import get_bigint_config
    from limbint.rlib import rbigint
    old = rbigint.get_config()
    config = get_bigint_config()
    rbigint.set_config(config)
    yield config
    rbigint.set_config(old)
