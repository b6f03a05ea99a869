from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class StyleTranslation:
    output: dict[str, Any] | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    # symbolizer kind -> {property: reason}
    unsupported_properties: dict[str, dict[str, str]] = field(default_factory=dict)


class StyleTranslator(Protocol):
    """
    Style translation interface.

    Implementations may suspend (e.g. call out to a style service). Problems with the
    style itself should be reported on the result; raising aborts the whole print.
    """

    async def read_style(self, native_style: Any) -> StyleTranslation: ...
