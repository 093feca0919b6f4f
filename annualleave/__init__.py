"""Annual leave calculation for public-sector staff: rules, form state and a command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]