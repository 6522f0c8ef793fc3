from .ids import ID_ALPHABET, IdGenerator, RandomIdGenerator

__all__ = [
    "ID_ALPHABET",
    "IdGenerator",
    "RandomIdGenerator",
]
