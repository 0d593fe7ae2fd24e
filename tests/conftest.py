import pytest

from lispy.builtin import env_builtin
from lispy.interpreter import Interpreter
from lispy.types.environment import Environment


@pytest.fixture
def env():
    """A fresh root environment with the standard natives, no prelude."""
    e = Environment()
    env_builtin.register(e)
    return e


@pytest.fixture
def interp():
    """A fresh interpreter session without the prelude."""
    return Interpreter(prelude=None)


@pytest.fixture
def run(interp):
    """Evaluate source text in the `interp` session and return the value."""
    return interp.eval
