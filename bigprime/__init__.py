"""Primality tests, prime search, Montgomery modpow and extended GCD for Python ints."""

__version__ = "0.1.0"
__all__ = ["monty", "numtheory", "prime"]