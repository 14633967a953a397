"""Extended Euclidean algorithm and modular inverses."""

from __future__ import annotations


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g`` and ``g == gcd(a, b) >= 0``."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    if old_r < 0:
        old_r, old_s, old_t = -old_r, -old_s, -old_t
    return old_r, old_s, old_t


def mod_inverse(a: int, m: int) -> int | None:
    """Return the inverse of ``a`` modulo ``m`` in ``[0, |m|)``, or None if none exists."""
    if m == 0:
        return None
    modulus = abs(m)
    g, x, _ = extended_gcd(a % modulus, modulus)
    if g != 1:
        return None
    return x % modulus