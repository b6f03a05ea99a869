from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from loguru import logger

DiagnosticLevel = Literal["error", "warning", "info"]


@dataclass(frozen=True)
class Diagnostic:
    """
    A non-fatal finding made while translating a layer (style errors, unsupported
    style properties, suspicious tile grids, ...).

    `layer` is the index of the layer in the map's layer stack; it is filled in once
    the spec is assembled.
    """

    level: DiagnosticLevel
    message: str
    layer: int | None = None
    details: Any = None

    def as_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"level": self.level, "message": self.message}
        if self.layer is not None:
            out["layer"] = self.layer
        if self.details is not None:
            out["details"] = self.details
        return out


def report(
    diagnostics: list[Diagnostic],
    level: DiagnosticLevel,
    message: str,
    details: Any = None,
) -> None:
    """Record a diagnostic and log it at the matching level."""
    diagnostics.append(Diagnostic(level=level, message=message, details=details))
    if details is not None:
        logger.log(level.upper(), f"{message}: {details}")
    else:
        logger.log(level.upper(), message)
