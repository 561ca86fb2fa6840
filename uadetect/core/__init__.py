"""Core layer: configuration, result types, errors and dependency container."""
