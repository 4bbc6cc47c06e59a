"""Dispatch of the numba decorators used by the skcost kernels.

`numba` is a soft dependency. If it is installed, `njit` and `prange`
dispatch to their numba counterparts. If not, the decorator returns the
undecorated functions and `prange` is the builtin `range`, such that all
kernels still run as plain numpy code.

Default arguments to `@njit` are read from environment variables
at import time:

- `NUMBA_CACHE`, default `True`.
- `NUMBA_FASTMATH`, default `False`.
- `NUMBA_PARALLEL`, default `False`.

Truthy values are `["", "1", "true", "True", "TRUE"]` and falsy values are
`["0", "false", "False", "FALSE"]`. Any other value raises a `ValueError` when
`skcost.utils.numba` is imported.

Keyword arguments passed directly to the decorator take precedence over the
environment defaults. For numba's own configuration variables, see
`https://numba.readthedocs.io/en/stable/reference/envvars.html`_.
"""

from functools import wraps
from os import environ

from sktime.utils.dependencies import _check_soft_dependencies

__all__ = ["njit", "prange", "numba_available", "read_boolean_env_var"]

TRUTHY_STRINGS = ["", "1", "true", "True", "TRUE"]
FALSY_STRINGS = ["0", "false", "False", "FALSE"]

numba_available = _check_soft_dependencies("numba", severity="none")


def read_boolean_env_var(name: str, default_value: bool) -> bool:
    """Read a boolean environment variable.

    Parameters
    ----------
    name : str
        Name of the environment variable.
    default_value : bool
        Value to return if the variable is not set.

    Returns
    -------
    bool
        The parsed value of the environment variable.

    Raises
    ------
    ValueError
        If the variable is set to neither a truthy nor a falsy string.
    """
    env_value = environ.get(name)
    if env_value is None:
        return default_value

    if env_value in TRUTHY_STRINGS:
        return True
    elif env_value in FALSY_STRINGS:
        return False
    else:
        raise ValueError(
            f"Invalid value for boolean environment variable '{name}': {env_value}"
        )


def _default_njit_kwargs() -> dict:
    return {
        "cache": read_boolean_env_var("NUMBA_CACHE", default_value=True),
        "fastmath": read_boolean_env_var("NUMBA_FASTMATH", default_value=False),
        "parallel": read_boolean_env_var("NUMBA_PARALLEL", default_value=False),
    }


def _passthrough(maybe_func=None, **kwargs):
    """Identity decorator supporting both ``@dec`` and ``@dec(**kwargs)``."""
    if callable(maybe_func):
        return maybe_func

    def decorator(func):
        return func

    return decorator


def _make_dispatcher(numba_decorator_name: str, default_kwargs: dict):
    """Create a decorator dispatching to ``numba.<numba_decorator_name>``."""
    if not numba_available:
        return _passthrough

    import numba

    numba_decorator = getattr(numba, numba_decorator_name)

    @wraps(numba_decorator)
    def dispatcher(maybe_func=None, **kwargs):
        # Explicit kwargs overwrite the environment defaults.
        kwargs = {**default_kwargs, **kwargs}
        return numba_decorator(maybe_func, **kwargs)

    return dispatcher


if numba_available:
    from numba import config as _numba_config
    from numba import prange

    # The TBB threading layer is not easily available, degrade its priority.
    _numba_config.THREADING_LAYER_PRIORITY = ["omp", "tbb", "workqueue"]
else:
    prange = range

_njit_kwargs = _default_njit_kwargs()
njit = _make_dispatcher("njit", _njit_kwargs)
