"""Status-line components, a status loop and a tiling window-management model."""

__version__ = "0.1.0"