"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of parfam:

- Erlang: Gamma distribution with integer shape, shape-scale
  and shape-rate parameterizations.
- Pareto: power-law tail distribution with shape-scale
  parameterization.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration is idempotent: configuring twice returns the same registry.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from parfam.families.builtins import (
    configure_erlang_family,
    configure_pareto_family,
)
from parfam.families.registry import ParametricFamilyRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_erlang_family()
    configure_pareto_family()
    registry = ParametricFamilyRegister()
    logger.debug("Configured families: %s", registry.list_registered())
    return registry


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
