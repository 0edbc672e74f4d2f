"""Console presentation layer: commands in, text out. No domain logic."""
