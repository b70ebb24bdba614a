"""
utensils: small helpers for comparisons and precondition checks.
"""

__version__ = "1.0.0"
