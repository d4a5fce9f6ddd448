"""Sport-mode command building, a publishing client and motion routines for a quadruped robot."""

__version__ = "0.1.0"
__all__ = ["client", "commands", "routines"]