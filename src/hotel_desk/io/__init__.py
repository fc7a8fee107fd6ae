"""I/O layer: database connectivity and statement execution."""
