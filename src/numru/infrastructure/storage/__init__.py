from ._numeric_storage import NumericStorage

__all__ = [NumericStorage.__name__]
