"""Management of university residence rooms, students, managers and applications."""

__version__ = "1.0.0"
__all__ = ["cli", "messages", "people", "ranking", "rooms", "system"]