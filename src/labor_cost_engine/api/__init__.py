"""HTTP adapter for the labor cost engine."""
