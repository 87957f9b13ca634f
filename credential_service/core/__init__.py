"""Core layer: configuration, constants, enums, Result types and errors."""
