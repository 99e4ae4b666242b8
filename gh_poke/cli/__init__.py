"""Command line interface for gh-poke."""
