"""Circle of Confusion calculator: settings and a per-value calculator for depth of field."""

__version__ = "0.1.3"
__all__ = ["calculator", "settings"]