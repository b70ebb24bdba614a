"""
Process-wide debugging switches.
"""


class Debug:
    """
    For holding some debugging variables.

    Set the attributes before importing the modules they affect.
    """

    is_debug = False
    """
    Whether module loggers default to DEBUG rather than INFO level.
    """
