from .counter import Counter

__all__ = ["Counter"]
