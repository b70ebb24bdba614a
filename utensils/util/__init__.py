"""
General utilities.
"""
