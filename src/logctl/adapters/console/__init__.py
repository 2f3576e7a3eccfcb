"""Console sinks."""
