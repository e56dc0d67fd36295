"""Student record services and graduation predicate calculation over caller-supplied repositories."""

__version__ = "0.1.0"
__all__ = ["records", "academic", "achievement", "activity", "course", "fuzzy"]