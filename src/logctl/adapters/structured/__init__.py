"""Structured (operating-system) sinks."""
