"""Console output and YAML helpers."""
