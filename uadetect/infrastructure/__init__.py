"""Infrastructure layer: matcher adapters, result cache, logging, enrichers."""
