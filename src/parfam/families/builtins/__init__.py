"""
Built-in distribution families for parfam.

This package contains the statistical distribution families that are
available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from parfam.families.builtins.continuous import (
    configure_erlang_family,
    configure_pareto_family,
)

__all__ = [
    "configure_erlang_family",
    "configure_pareto_family",
]
