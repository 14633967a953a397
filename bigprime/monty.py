"""Modular exponentiation with Montgomery multiplication and a 4-bit window."""

from __future__ import annotations

from collections.abc import Iterator

_BITS = 64
_MASK = (1 << _BITS) - 1
_WINDOW = 4


def _inv_mod_alt(b: int) -> int:
    """Return -b**-1 mod 2**64 for an odd word ``b`` (Newton–Raphson iteration)."""
    if b & 1 == 0:
        raise ValueError("word must be odd to be invertible modulo 2**64")
    k0 = (2 - b) & _MASK
    t = (b - 1) & _MASK
    i = 1
    while i < _BITS:
        t = (t * t) & _MASK
        k0 = (k0 * (t + 1)) & _MASK
        i <<= 1
    return (-k0) & _MASK


def _montgomery(x: int, y: int, m: int, k: int, words: int) -> int:
    """Almost Montgomery multiplication: x * y * 2**(-64*words) modulo m.

    Both inputs must be below 2**(64*words); the result is below that bound
    as well, though not necessarily below ``m``.
    """
    t = x * y
    for i in range(words):
        shift = _BITS * i
        q = (((t >> shift) & _MASK) * k) & _MASK
        t += (q * m) << shift
    t >>= _BITS * words
    if t >> (_BITS * words):
        t -= m
    return t


def _nibbles(y: int) -> Iterator[int]:
    """Yield the 4-bit windows of ``y``, most significant first, over whole words."""
    words = (y.bit_length() + _BITS - 1) // _BITS
    for shift in range(words * _BITS - _WINDOW, -1, -_WINDOW):
        yield (y >> shift) & ((1 << _WINDOW) - 1)


def monty_modpow(x: int, y: int, m: int) -> int:
    """Compute ``x ** y mod m`` for an odd modulus using a fixed 4-bit window."""
    if x < 0 or y < 0:
        raise ValueError("base and exponent must be non-negative")
    if m <= 0 or m & 1 == 0:
        raise ValueError("modulus must be odd and positive")

    num_words = (m.bit_length() + _BITS - 1) // _BITS
    k = _inv_mod_alt(m & _MASK)
    r_bits = num_words * _BITS

    if x >> r_bits:
        x %= m

    def mont(a: int, b: int) -> int:
        return _montgomery(a, b, m, k, num_words)

    rr = (1 << (2 * r_bits)) % m

    powers = [mont(1, rr), mont(x, rr)]
    for _ in range(2, 1 << _WINDOW):
        powers.append(mont(powers[-1], powers[1]))

    z = powers[0]
    for index, nibble in enumerate(_nibbles(y)):
        if index:
            for _ in range(_WINDOW):
                z = mont(z, z)
        z = mont(z, powers[nibble])

    z = mont(z, 1)
    if z >= m:
        z -= m
        if z >= m:
            z %= m
    return z