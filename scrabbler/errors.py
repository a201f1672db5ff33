"""Exceptions raised at the edges of the engine."""


class DataError(ValueError):
    """Dictionary, tile table, board layout or game overlay is malformed or missing."""


class InvalidRackInput(ValueError):
    """Rack string holds characters outside A-Z and the blank markers, or too many tiles."""
