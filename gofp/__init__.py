"""Option type with JSON encoding and SQL parameter helpers."""

__version__ = "0.1.0"
__all__ = ["option", "jsoncodec", "sqladapt"]