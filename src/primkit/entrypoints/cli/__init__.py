"""PRIMKIT command-line interface."""
