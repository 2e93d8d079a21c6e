"""
Exception hierarchy raised by parfam.

All errors derive from :class:`ParfamError` and additionally from the builtin
exception a caller would naturally catch (``ValueError``, ``ArithmeticError``,
``KeyError``).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class ParfamError(Exception):
    """Base class for all parfam errors."""


class InvalidParameterError(ParfamError, ValueError):
    """Parameter values violate a constraint of their parametrization."""


class UndefinedOperationError(ParfamError, ArithmeticError):
    """A statistic or operation is not defined for the given parameters."""


class InvalidSampleError(ParfamError, ValueError):
    """Data passed to a fitter cannot produce an estimate."""


class CharacteristicNotFoundError(ParfamError, KeyError):
    """The distribution does not provide the requested characteristic."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


__all__ = [
    "ParfamError",
    "InvalidParameterError",
    "UndefinedOperationError",
    "InvalidSampleError",
    "CharacteristicNotFoundError",
]
