from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    background: str
    border: str


@dataclass(frozen=True)
class PresentationParams:
    """Visual attributes derived from a disposition and a generated document."""

    bg_color: str
    border_color: str
    stamp_label: str
    stamp_color: str
    watermark_text: str
    header_text: str
    issue_number: int
    issue_date: str
    header_font_size: int
    title_font_size: int
    description_font_size: int
