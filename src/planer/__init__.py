"""planer: a small local task list with a fire-and-forget remote mirror."""

__version__ = "0.1.0"
