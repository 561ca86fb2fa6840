"""Application layer: the device detection resolution engine."""
