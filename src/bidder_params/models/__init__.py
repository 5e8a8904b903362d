from .binding import SchemaBinding, Violation

__all__ = ["SchemaBinding", "Violation"]
