"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from parfam.families.builtins.continuous.erlang import configure_erlang_family
from parfam.families.builtins.continuous.pareto import configure_pareto_family

__all__ = [
    "configure_erlang_family",
    "configure_pareto_family",
]
