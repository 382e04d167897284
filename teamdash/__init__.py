"""Server-rendered team dashboard: Flask app, page rendering and team member models."""

__version__ = "0.1.0"
__all__ = ["__version__"]