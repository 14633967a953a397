# bigprime

Number theory helpers for plain Python integers of any size. The package has
three modules and no dependencies outside the standard library.

## `bigprime.prime`

- `probably_prime(x, n)` – reports whether `x` is probably prime. Values below
  64 are looked up directly, even numbers and multiples of the primes up to 53
  are rejected by trial division, and the rest must pass `n + 1` rounds of
  Miller–Rabin (the last one with base 2) and an "almost extra strong" Lucas
  test. Exact for all inputs below 2⁶⁴; for a randomly chosen composite the
  chance of a wrong answer is at most ¼ⁿ. Raises `ValueError` for negative `x`.
- `next_prime(n)` – the smallest prime strictly greater than `n` (2 for any
  `n < 2`). Candidates are sieved by small odd primes before being checked with
  `probably_prime(candidate, 20)`.
- `probably_prime_miller_rabin(n, reps, force2)` – `reps` Miller–Rabin rounds
  with bases drawn from a `random.Random` seeded with the low 64 bits of `n`, so
  the result for a given `n` is repeatable. With `force2` the last round uses
  base 2. Raises `ValueError` for `n < 2`.
- `probably_prime_lucas(n)` – the almost extra strong Lucas probable prime test
  with Baillie-OEIS parameter selection (P = 3, 4, …, Q = 1). Returns `False`
  for 0, 1 and 2 and for perfect squares; raises `ValueError` for negative or
  other even `n`.

The primality tests are not meant for judging numbers that an adversary may
have built to fool them.

## `bigprime.monty`

- `monty_modpow(x, y, m)` – `x ** y % m` for an odd positive modulus, computed
  with Montgomery multiplication over 64-bit words and a fixed 4-bit window.
  Raises `ValueError` for an even or non-positive modulus, or for a negative
  base or exponent.

## `bigprime.numtheory`

- `extended_gcd(a, b)` – returns `(g, x, y)` with `a*x + b*y == g` and
  `g == gcd(a, b) >= 0`.
- `mod_inverse(a, m)` – the inverse of `a` modulo `m`, in the range
  `[0, |m|)`, or `None` when `m` is 0 or no inverse exists.

## Usage

```python
from bigprime.prime import probably_prime, next_prime
from bigprime.monty import monty_modpow
from bigprime.numtheory import extended_gcd, mod_inverse

probably_prime(2**255 - 19, 20)   # True
probably_prime(3239, 20)          # False (a Lucas pseudoprime)
next_prime(1032989)               # 1033001

monty_modpow(4, 13, 497)          # 445

g, x, y = extended_gcd(240, 46)   # g == 2 and 240*x + 46*y == g
mod_inverse(3, 11)                # 4
mod_inverse(2, 4)                 # None
```

## What it does not do

This is a library only: there is no command-line tool. It has no big-integer
type of its own (Python's `int` is used throughout), no random prime
generation and no Jacobi symbol or square-root functions in its public
interface.

## Running the tests

From a checkout of the package:

```
pip install -e ".[test]"
pytest
```