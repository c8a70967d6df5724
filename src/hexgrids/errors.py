"""Exceptions raised by hexgrids."""


class HexGridError(Exception):
    """Base class for all hexgrids errors."""


class GridConfigurationError(HexGridError, ValueError):
    """Grid dimensions are not positive integers."""


class GridIntegrityError(HexGridError, ValueError):
    """A built grid violates one of its topology invariants."""


class NotAdjacentError(HexGridError, LookupError):
    """A cell was asked for the edge towards a cell it does not touch."""


class UnknownEdgeError(HexGridError, LookupError):
    """A cell was asked for the direction of an edge it does not own."""


__all__ = [
    "HexGridError",
    "GridConfigurationError",
    "GridIntegrityError",
    "NotAdjacentError",
    "UnknownEdgeError",
]
