"""Probabilistic primality tests (Miller–Rabin, Baillie–PSW) and prime search."""

from __future__ import annotations

import math
import random
from itertools import accumulate

_PRIMES_A_FACTORS = (3, 5, 7, 11, 13, 17, 19, 23, 37)
_PRIMES_B_FACTORS = (29, 31, 41, 43, 47, 53)
_PRIMES_A = math.prod(_PRIMES_A_FACTORS)
_PRIMES_B = math.prod(_PRIMES_B_FACTORS)

# Bit i is set when i is a prime below 64.
_PRIME_BIT_MASK = sum(
    1 << p for p in (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61)
)

_NUMBER_OF_PRIMES = 127
_PRIME_GAP = (
    2, 2, 4, 2, 4, 2, 4, 6, 2, 6, 4, 2, 4, 6, 6, 2, 6, 4, 2, 6, 4, 6, 8, 4, 2, 4, 2, 4, 14, 4, 6,
    2, 10, 2, 6, 6, 4, 6, 6, 2, 10, 2, 4, 2, 12, 12, 4, 2, 4, 6, 2, 10, 6, 6, 6, 2, 6, 4, 2, 10,
    14, 4, 2, 4, 14, 6, 10, 2, 4, 6, 8, 6, 6, 4, 6, 8, 4, 8, 10, 2, 10, 2, 6, 4, 6, 8, 4, 2, 4, 12,
    8, 4, 8, 4, 6, 12, 2, 18, 6, 10, 6, 6, 2, 6, 10, 6, 6, 2, 6, 6, 4, 2, 12, 10, 2, 4, 6, 6, 2,
    12, 4, 6, 8, 10, 8, 10, 8, 6, 6, 4, 8, 6, 4, 8, 4, 14, 10, 12, 2, 10, 2, 4, 2, 10, 14, 4, 2, 4,
    14, 4, 2, 4, 20, 4, 8, 10, 8, 4, 6, 6, 14, 4, 6, 6, 8, 6, 12,
)
# Odd primes starting at 3, derived from the gap table.
_SMALL_ODD_PRIMES = tuple(accumulate(_PRIME_GAP[:-1], initial=3))

_INCR_LIMIT = 0x10000
_LIMB_MASK = (1 << 64) - 1


def _trailing_zeros(value: int) -> int:
    return (value & -value).bit_length() - 1


def _jacobi(a: int, n: int) -> int:
    """Jacobi symbol (a/n) for odd positive ``n``."""
    if n <= 0 or n & 1 == 0:
        raise ValueError("jacobi: n must be odd and positive")
    a %= n
    result = 1
    while a:
        while a & 1 == 0:
            a >>= 1
            if n & 7 in (3, 5):
                result = -result
        a, n = n, a
        if a & 3 == 3 and n & 3 == 3:
            result = -result
        a %= n
    return result if n == 1 else 0


def probably_prime(x: int, n: int) -> bool:
    """Report whether ``x`` is probably prime.

    Applies ``n + 1`` rounds of Miller–Rabin (one with base 2) and a strong
    Lucas test. Exact for inputs below 2**64.
    """
    if x < 0:
        raise ValueError("x must be non-negative")
    if x == 0:
        return False
    if x < 64:
        return bool(_PRIME_BIT_MASK & (1 << x))
    if x & 1 == 0:
        return False

    r_a = x % _PRIMES_A
    r_b = x % _PRIMES_B
    if any(r_a % p == 0 for p in _PRIMES_A_FACTORS) or any(
        r_b % p == 0 for p in _PRIMES_B_FACTORS
    ):
        return False

    return probably_prime_miller_rabin(x, n + 1, True) and probably_prime_lucas(x)


def next_prime(n: int) -> int:
    """Return the smallest prime strictly greater than ``n``."""
    if n < 2:
        return 2

    res = (n + 1) | 1
    if res < 7:
        return res

    prime_limit = min(res.bit_length() // 2, _NUMBER_OF_PRIMES - 1)
    sieve = _SMALL_ODD_PRIMES[:prime_limit]

    while True:
        moduli = [res % p for p in sieve]
        difference = 0
        for incr in range(0, _INCR_LIMIT, 2):
            if not any((m + incr) % p == 0 for m, p in zip(moduli, sieve)):
                res += difference
                difference = 0
                if probably_prime(res, 20):
                    return res
            difference += 2
        res += difference


def probably_prime_miller_rabin(n: int, reps: int, force2: bool) -> bool:
    """Run ``reps`` Miller–Rabin rounds with pseudo-random bases seeded from ``n``.

    When ``force2`` is true the last round uses base 2.
    """
    if n < 2:
        raise ValueError("n must be at least 2")
    nm1 = n - 1
    k = _trailing_zeros(nm1)
    q = nm1 >> k
    nm3 = n - 2

    rng = random.Random(n & _LIMB_MASK)

    for i in range(reps):
        if i == reps - 1 and force2:
            x = 2
        else:
            if nm3 <= 0:
                raise ValueError("n too small to draw a random base")
            x = rng.randrange(nm3) + 2

        y = pow(x, q, n)
        if y == 1 or y == nm1:
            continue

        for _ in range(1, k):
            y = pow(y, 2, n)
            if y == nm1:
                break
            if y == 1:
                return False
        else:
            return False

    return True


def probably_prime_lucas(n: int) -> bool:
    """Almost extra strong Lucas probable prime test with Baillie-OEIS parameters."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n in (0, 1, 2):
        return False
    if n & 1 == 0:
        raise ValueError("n must be odd")

    p = 3
    while True:
        if p > 10000:
            raise RuntimeError(f"internal error: cannot find (D/n) = -1 for {n}")
        j = _jacobi(p * p - 4, n)
        if j == -1:
            break
        if j == 0:
            return n == p + 2
        if p == 40:
            root = math.isqrt(n)
            if root * root == n:
                return False
        p += 1

    s = n + 1
    r = _trailing_zeros(s)
    s >>= r
    nm2 = n - 2

    vk = 2
    vk1 = p
    for i in reversed(range(s.bit_length())):
        if (s >> i) & 1:
            vk = (vk * vk1 + n - p) % n
            vk1 = (vk1 * vk1 + nm2) % n
        else:
            vk1 = (vk * vk1 + n - p) % n
            vk = (vk * vk + nm2) % n

    if vk == 2 or vk == nm2:
        if abs(vk * p - (vk1 << 1)) % n == 0:
            return True

    for _ in range(r - 1):
        if vk == 0:
            return True
        if vk == 2:
            return False
        vk = (vk * vk - 2) % n

    return False