"""Domain layer: value objects, enums, errors and ports for device detection."""
