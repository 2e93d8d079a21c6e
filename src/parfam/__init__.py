"""
parfam
======

Closed-form parametric distribution families: type definitions, the
distribution protocol, parametric family management, and the built-in
Erlang and Pareto families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from .api import Erlang, Pareto, fit_mle, get_family
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("parfam")
__all__ = [
    "__version__",
    "Erlang",
    "Pareto",
    "fit_mle",
    "get_family",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _family_all
del _types_all
