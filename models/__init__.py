"""Domain models for the clinic"""

from .doctor import Doctor, SORT_KEYS, sort_doctors

__all__ = ['Doctor', 'SORT_KEYS', 'sort_doctors']
