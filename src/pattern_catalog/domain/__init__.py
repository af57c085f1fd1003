"""Domain layer: demo value objects, trace collection and exceptions."""
