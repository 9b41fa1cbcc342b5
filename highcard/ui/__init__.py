"""User interfaces for the high card game."""
