"""Arithmetic on ``(lower, upper)`` iterator size hints.

A size hint is a pair ``(lower, upper)`` where ``lower`` is a bound that
saturates at :data:`USIZE_MAX` and ``upper`` is either a bound or ``None``
when no upper bound is known (or it would exceed :data:`USIZE_MAX`).
"""

from __future__ import annotations

from typing import Optional, Tuple

USIZE_MAX = 2**64 - 1
_U32_MAX = 2**32 - 1

SizeHint = Tuple[int, Optional[int]]

__all__ = [
    "USIZE_MAX",
    "SizeHint",
    "add",
    "add_scalar",
    "sub_scalar",
    "mul",
    "mul_scalar",
    "pow_scalar_base",
    "hint_max",
    "hint_min",
]


def _saturate(value: int) -> int:
    return min(value, USIZE_MAX)


def _checked(value: int) -> Optional[int]:
    return value if value <= USIZE_MAX else None


def _checked_pow(base: int, exp: int) -> Optional[int]:
    if exp == 0:
        return 1
    if base in (0, 1):
        return base
    # Any base of at least 2 raised to 64 or more already overflows.
    if exp >= 64:
        return None
    return _checked(base**exp)


def add(a: SizeHint, b: SizeHint) -> SizeHint:
    """Add two size hints."""
    low = _saturate(a[0] + b[0])
    if a[1] is None or b[1] is None:
        return low, None
    return low, _checked(a[1] + b[1])


def add_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Add ``x`` to both bounds of a size hint."""
    low, hi = sh
    return _saturate(low + x), None if hi is None else _checked(hi + x)


def sub_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Subtract ``x`` from both bounds, saturating at zero."""
    low, hi = sh
    return max(low - x, 0), None if hi is None else max(hi - x, 0)


def mul(a: SizeHint, b: SizeHint) -> SizeHint:
    """Multiply two size hints."""
    low = _saturate(a[0] * b[0])
    if a[1] is not None and b[1] is not None:
        hi = _checked(a[1] * b[1])
    elif a[1] == 0 or b[1] == 0:
        hi = 0
    else:
        hi = None
    return low, hi


def mul_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Multiply both bounds of a size hint by ``x``."""
    low, hi = sh
    return _saturate(low * x), None if hi is None else _checked(hi * x)


def pow_scalar_base(base: int, exp: SizeHint) -> SizeHint:
    """Raise ``base`` to a size-hint exponent."""
    exp_low = min(exp[0], _U32_MAX)
    low = _checked_pow(base, exp_low)
    if low is None:
        low = USIZE_MAX
    hi = None if exp[1] is None else _checked_pow(base, min(exp[1], _U32_MAX))
    return low, hi


def hint_max(a: SizeHint, b: SizeHint) -> SizeHint:
    """Return the hint of whichever of two iterators is longer."""
    lower = max(a[0], b[0])
    if a[1] is None or b[1] is None:
        return lower, None
    return lower, max(a[1], b[1])


def hint_min(a: SizeHint, b: SizeHint) -> SizeHint:
    """Return the hint of whichever of two iterators is shorter."""
    lower = min(a[0], b[0])
    if a[1] is not None and b[1] is not None:
        return lower, min(a[1], b[1])
    return lower, a[1] if a[1] is not None else b[1]