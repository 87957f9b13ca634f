"""Application layer: commands and their handlers."""
