"""
Process-wide lookup of parametric families by name.

Families register themselves once, when
:func:`parfam.families.configuration.configure_families_register` runs;
distribution instances resolve their family through this registry.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from parfam.families.parametric_family import ParametricFamily

logger = logging.getLogger(__name__)


class ParametricFamilyRegister:
    """
    Singleton mapping family names to :class:`ParametricFamily` objects.

    All methods are class methods operating on the single instance, which is
    created on first use.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._families = {}
            cls._instance = instance
        return cls._instance

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Family registered under ``name``.

        Raises
        ------
        ValueError
            If there is none.
        """
        family = cls()._families.get(name)
        if family is None:
            raise ValueError(f"No family {name} found in register")
        return family

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._families

    @classmethod
    def list_registered(cls) -> list[str]:
        """Registered names in registration order."""
        return list(cls()._families)

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add ``family`` under its own name.

        Raises
        ------
        ValueError
            If the name is taken.
        """
        families = cls()._families
        if family.name in families:
            raise ValueError(f"Family {family.name} already found in register")
        families[family.name] = family
        logger.debug("Registered family %s", family.name)

    @classmethod
    def _reset(cls) -> None:
        """Forget the instance together with every registered family."""
        cls._instance = None
