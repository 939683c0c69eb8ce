"""Maps a disposition and generated document to presentation parameters.

Font tiers keep the fixed-size layout boxes from overflowing when the model
returns longer strings than it was asked for.
"""

import random
from datetime import date

from app.generation.models import REJECTION_HEADER, Disposition, GeneratedDocument
from app.presentation.models import Palette, PresentationParams

APPROVED_PALETTE = Palette(background="#f4f1ea", border="#5c4033")
REJECTED_PALETTE = Palette(background="#e5e7eb", border="#1f2937")
STAMP_COLOR = "#b91c1c"

APPROVED_STAMP_LABEL = "承認"
REJECTED_STAMP_LABEL = "却下"
APPROVED_WATERMARK = "APPROVED"
REJECTED_WATERMARK = "REJECTED"
DEFAULT_APPROVED_HEADER = "休養許可証"
DEFAULT_REJECTED_HEADER = REJECTION_HEADER

HEADER_SMALL, HEADER_LARGE = 30, 40
TITLE_SMALL, TITLE_LARGE = 26, 34
DESCRIPTION_SMALL, DESCRIPTION_MEDIUM, DESCRIPTION_LARGE = 14, 16, 18

ISSUE_NUMBER_MIN = 1000
ISSUE_NUMBER_MAX = 9999  # exclusive
ISSUE_DATE_FORMAT = "%d/%m/%Y"


def map_presentation(
    disposition: Disposition,
    document: GeneratedDocument,
    *,
    issued_on: date | None = None,
    rng: random.Random | None = None,
) -> PresentationParams:
    """Derive presentation parameters.

    Deterministic in (disposition, document) apart from the issue date
    (today unless given) and the cosmetic issue number (unseeded unless
    an rng is given).
    """
    rejected = disposition.rejected
    palette = REJECTED_PALETTE if rejected else APPROVED_PALETTE
    header_text = document.header or (
        DEFAULT_REJECTED_HEADER if rejected else DEFAULT_APPROVED_HEADER
    )
    issued_on = issued_on or date.today()
    number_source = rng or random

    return PresentationParams(
        bg_color=palette.background,
        border_color=palette.border,
        stamp_label=REJECTED_STAMP_LABEL if rejected else APPROVED_STAMP_LABEL,
        stamp_color=STAMP_COLOR,
        watermark_text=REJECTED_WATERMARK if rejected else APPROVED_WATERMARK,
        header_text=header_text,
        issue_number=number_source.randrange(ISSUE_NUMBER_MIN, ISSUE_NUMBER_MAX),
        issue_date=issued_on.strftime(ISSUE_DATE_FORMAT),
        header_font_size=header_font_size(header_text),
        title_font_size=title_font_size(document.title),
        description_font_size=description_font_size(document.description),
    )


def header_font_size(header_text: str) -> int:
    return HEADER_SMALL if len(header_text) > 6 else HEADER_LARGE


def title_font_size(title: str) -> int:
    return TITLE_SMALL if len(title) > 12 else TITLE_LARGE


def description_font_size(description: str) -> int:
    length = len(description)
    if length > 90:
        return DESCRIPTION_SMALL
    if length > 60:
        return DESCRIPTION_MEDIUM
    return DESCRIPTION_LARGE
