"""Adapters for PRIMKIT.

Concrete implementations of the contracts in `primkit.interfaces`:
comparators (natural, locale, case-insensitive, reversed, keyed) and pivot
selectors (random, first, last, middle).

Dependency rule: may import `primkit.interfaces`; the interfaces must not
import this package.
"""
