"""Contract tests.

Each interface gets a fixture parametrized over its adapters and a suite
that only asserts the public contract, so adapters stay interchangeable.
"""
