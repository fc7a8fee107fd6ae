"""Infrastructure layer: record declarations, validation and SQL building."""
