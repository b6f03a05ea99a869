from __future__ import annotations


class PrintSpecError(Exception):
    """Base class for everything that can go wrong while building a print spec."""


class IncompleteViewState(PrintSpecError):
    """Units, resolution or center could not be read from the map view."""


class InvalidUnitKind(PrintSpecError, ValueError):
    def __init__(self, units: object):
        super().__init__(f"Unknown map units: {units!r}")
        self.units = units


class UnknownProjection(PrintSpecError):
    def __init__(self, projection: str):
        super().__init__(f"Can not reproject from unknown projection: {projection!r}")
        self.projection = projection


class StyleTranslationFailure(PrintSpecError):
    """The style translator raised while reading a vector layer style."""


class SpecAssemblyFailed(PrintSpecError):
    """
    Building the spec failed as a whole.

    Raised from the underlying cause; no partial spec is ever returned.
    """
