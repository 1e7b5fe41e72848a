"""Application framework with events, input codes, a self-registering test runner, a scope timer and game objects."""

__version__ = "0.0.1"