"""Masking helpers for credentials written to logs."""
from bankcal.mask.password import password

__all__ = ["password"]
