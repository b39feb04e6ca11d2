"""Entrypoints (inbound adapters) for PRIMKIT.

Expose the toolkit to the outside world as CLI commands. Parse and validate
inputs, call the library functions, and present results.
"""
