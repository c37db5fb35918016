"""Error kinds raised by the grid primitives and the cave generator.

Two kinds exist:

- ``InvalidArgument`` — the caller passed something the operation cannot
  accept (negative radius, probability outside [0, 1], ...). Raised at the
  boundary, never clamped.
- ``InvariantViolation`` — a coordinate broke its zero-sum constraint or a
  distance came out fractional. This is a programming error.
"""

from __future__ import annotations


class RhombusError(Exception):
    """Base class for all errors raised by rhombus."""


class InvalidArgument(RhombusError, ValueError):
    """An argument is outside the range an operation accepts."""


class InvariantViolation(RhombusError, AssertionError):
    """A coordinate or computed value broke a structural invariant."""
