"""Shared types for palette-check: FilterReport."""

from dataclasses import dataclass, field


@dataclass
class FilterReport:
    """Outcome of one palette check, for text/JSON output."""

    palette_path: str = ''
    picture_path: str = ''
    output_path: str = ''
    width: int = 0
    height: int = 0
    palette_colours: int = 0  # distinct colours in the palette
    marking: str = ''  # marking colour as #rrggbbaa
    replaced: int = 0  # pixels overwritten with the marking colour
    foreign_colours: list[str] = field(default_factory=list)  # distinct foreign colours, #rrggbbaa

    @property
    def total(self) -> int:
        return self.width * self.height

    @property
    def replaced_pct(self) -> float:
        return round(self.replaced / self.total * 100, 1) if self.total else 0.0
