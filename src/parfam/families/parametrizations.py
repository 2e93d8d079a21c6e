"""
Parametrizations of distribution families.

A parametrization is a frozen dataclass holding one way of writing down the
parameters of a family (e.g. Erlang by shape and scale, or by shape and
rate). Validity conditions are instance methods marked with
:func:`constraint`; the :func:`parametrization` decorator collects them and
registers the class with its family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from numbers import Real
from typing import TYPE_CHECKING

import numpy as np

from parfam.errors import InvalidParameterError
from parfam.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from parfam.families.parametric_family import ParametricFamily

_CONSTRAINT_ATTR = "__parfam_constraint__"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Named predicate over a parametrization instance.

    Parameters
    ----------
    description : str
        Text used in error messages, e.g. ``"scale > 0"``.
    check : Callable[[Any], bool]
        Returns True when the instance satisfies the constraint.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Base class of all parametrizations.

    Subclasses become frozen slotted dataclasses through
    :func:`parametrization`; their fields are the parameters.
    """

    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]
    _constraints: ClassVar[tuple[ParametrizationConstraint, ...]] = ()

    @property
    def name(self) -> str:
        return type(self).__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values keyed by field name, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def values(self) -> tuple[Any, ...]:
        return tuple(self.parameters.values())

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return list(self._constraints)

    def validate(self) -> None:
        """
        Check every constraint of the parametrization.

        Raises
        ------
        InvalidParameterError
            Naming all constraints that do not hold.
        """
        failed = [c.description for c in self._constraints if not c.check(self)]
        if not failed:
            return
        family = type(self).__family__.name
        if len(failed) == 1:
            problem = f'constraint "{failed[0]}" does not hold'
        else:
            problem = "constraints " + ", ".join(f'"{d}"' for d in failed) + " do not hold"
        raise InvalidParameterError(f"{family}: {problem} for {self.parameters}")

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Express the same distribution in the family's base parametrization.

        The base parametrization itself does not override this.
        """
        return self


def constraint(description: str) -> Callable[[Callable[[Any], Any]], Callable[[Any], bool]]:
    """
    Mark an instance method of a parametrization as a validity constraint.

    The method is called with the instance and its result is coerced to
    ``bool``, so NumPy comparisons can be returned directly.

    Examples
    --------
    >>> class Scale(Parametrization):
    ...     scale: float
    ...
    ...     @constraint("scale > 0")
    ...     def check_scale(self):
    ...         return self.scale > 0
    """

    def mark(check: Callable[[Any], Any]) -> Callable[[Any], bool]:
        @wraps(check)
        def predicate(self: Any) -> bool:
            return bool(check(self))

        setattr(predicate, _CONSTRAINT_ATTR, description)
        return predicate

    return mark


def constraint_description(func: object) -> str | None:
    """Description attached by :func:`constraint`, or None for plain callables."""
    return getattr(func, _CONSTRAINT_ATTR, None)


def _collect_constraints(cls: type) -> tuple[ParametrizationConstraint, ...]:
    found = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            if constraint_description(attr.__func__) is not None:
                raise TypeError(
                    f"@constraint '{attr_name}' must be an instance method, "
                    f"not @{type(attr).__name__}"
                )
            continue
        description = constraint_description(attr) if isfunction(attr) else None
        if description is not None:
            found.append(ParametrizationConstraint(description=description, check=attr))
    return tuple(found)


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator registering a parametrization with ``family``.

    The class is turned into a frozen slotted dataclass unless it already is
    a dataclass, its constraints are collected, and it is registered under
    ``name``.

    Raises
    ------
    TypeError
        If a constraint is a static or class method.
    ValueError
        If ``family`` already has a parametrization called ``name``.
    """

    def register(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)
        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)
        family.register_parametrization(name, cls)
        return cls

    return register


def _is_real_scalar(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def promote_to_float(*values: Any) -> tuple[np.floating[Any], ...]:
    """
    Convert parameter values to one common NumPy floating type.

    The widest floating type among the arguments wins; if none of them is
    floating (e.g. two integers), ``float64`` is used.

    Raises
    ------
    InvalidParameterError
        If a value is not a real scalar: strings, booleans, complex numbers
        and arrays are rejected.

    Examples
    --------
    >>> promote_to_float(np.float32(2.0), 1)
    (np.float32(2.0), np.float32(1.0))
    >>> promote_to_float(3, 2)
    (np.float64(3.0), np.float64(2.0))
    """
    for value in values:
        if not _is_real_scalar(value):
            raise InvalidParameterError(f"Expected a real number, got {value!r}")
    floating = [
        dtype
        for dtype in (np.asarray(v).dtype for v in values)
        if np.issubdtype(dtype, np.floating)
    ]
    common = np.result_type(*floating) if floating else np.dtype(np.float64)
    return tuple(common.type(v) for v in values)
