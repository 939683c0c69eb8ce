"""Composes the certificate and social-preview layouts as SVG."""

import base64

import svgwrite

from app.generation.models import GeneratedDocument
from app.presentation.models import PresentationParams
from app.rendering.models import FontAsset
from app.rendering.text_layout import wrap_text

CERTIFICATE_WIDTH, CERTIFICATE_HEIGHT = 600, 800
OG_IMAGE_WIDTH, OG_IMAGE_HEIGHT = 1200, 630

INK_COLOR = "#2c2c2c"
PAPER_COLOR = "#f4f1ea"
TITLE_COLOR = "#b91c1c"
BRAND_BROWN = "#5c4033"

AGENCY_NAME = "サボり許可局"
AGENCY_NAME_EN = "Official Excuse Agency"
AGENCY_TAGLINE = "あなたの怠惰を、論理的に正当化します。"

_CONTENT_LEFT = 60
_CONTENT_WIDTH = 480


class SvgRenderer:
    """Renders fixed-size layouts with an embedded typeface."""

    def render_certificate(
        self,
        params: PresentationParams,
        document: GeneratedDocument,
        font: FontAsset,
    ) -> str:
        width, height = CERTIFICATE_WIDTH, CERTIFICATE_HEIGHT
        dwg = self._new_drawing(width, height, font)
        family = self._font_family(font)

        dwg.add(dwg.rect(insert=(0, 0), size=(width, height), fill=params.bg_color))
        dwg.add(dwg.rect(
            insert=(12, 12), size=(width - 24, height - 24),
            fill="none", stroke=params.border_color, stroke_width=6,
        ))
        dwg.add(dwg.rect(
            insert=(22, 22), size=(width - 44, height - 44),
            fill="none", stroke=params.border_color, stroke_width=1.5,
        ))

        watermark = dwg.text(
            params.watermark_text,
            insert=(width / 2, height / 2 + 30),
            font_family=family, font_size=96, font_weight="bold",
            fill=params.border_color, fill_opacity=0.08, text_anchor="middle",
        )
        watermark.rotate(-35, center=(width / 2, height / 2))
        dwg.add(watermark)

        self._add_header_bar(dwg, params, family, width)

        header_lines = wrap_text(
            params.header_text, font_size=params.header_font_size,
            max_width=_CONTENT_WIDTH, max_lines=1,
        )
        self._add_lines(
            dwg, header_lines, x=width / 2, y=135, font_size=params.header_font_size,
            family=family, fill=INK_COLOR, anchor="middle", bold=True,
        )
        dwg.add(dwg.line(start=(80, 160), end=(width - 80, 160),
                         stroke=params.border_color, stroke_width=1))

        self._add_label(dwg, "件名", x=width / 2, y=195, family=family,
                        color=params.border_color, anchor="middle")
        title_lines = wrap_text(
            document.title, font_size=params.title_font_size,
            max_width=_CONTENT_WIDTH, max_lines=2,
        )
        self._add_lines(
            dwg, title_lines, x=width / 2, y=238, font_size=params.title_font_size,
            family=family, fill=TITLE_COLOR, anchor="middle", bold=True,
        )

        self._add_label(dwg, "所見", x=_CONTENT_LEFT, y=330, family=family,
                        color=params.border_color)
        description_lines = wrap_text(
            document.description, font_size=params.description_font_size,
            max_width=_CONTENT_WIDTH, max_lines=7,
        )
        self._add_lines(
            dwg, description_lines, x=_CONTENT_LEFT, y=362,
            font_size=params.description_font_size, family=family, fill=INK_COLOR,
            line_height=1.6,
        )

        self._add_label(dwg, "措置", x=_CONTENT_LEFT, y=572, family=family,
                        color=params.border_color)
        prescription_lines = wrap_text(
            document.prescription, font_size=20, max_width=_CONTENT_WIDTH, max_lines=2,
        )
        self._add_lines(
            dwg, prescription_lines, x=_CONTENT_LEFT, y=604, font_size=20,
            family=family, fill=INK_COLOR, bold=True,
        )

        dwg.add(dwg.text("右記の通り認定する", insert=(_CONTENT_LEFT, 690),
                         font_family=family, font_size=14, fill=INK_COLOR))
        dwg.add(dwg.text(f"{AGENCY_NAME} 局長", insert=(_CONTENT_LEFT, 722),
                         font_family=family, font_size=20, font_weight="bold",
                         fill=INK_COLOR))

        self._add_stamp(dwg, params, family, center=(470, 695))
        return dwg.tostring()

    def render_og_image(self, font: FontAsset) -> str:
        """Static social-preview card; independent of any user input."""
        width, height = OG_IMAGE_WIDTH, OG_IMAGE_HEIGHT
        dwg = self._new_drawing(width, height, font)
        family = self._font_family(font)

        dwg.add(dwg.rect(insert=(0, 0), size=(width, height), fill=PAPER_COLOR))
        dwg.add(dwg.rect(insert=(8, 8), size=(width - 16, height - 16),
                         fill="none", stroke=TITLE_COLOR, stroke_width=16))
        dwg.add(dwg.text(AGENCY_NAME, insert=(width / 2, 260), font_family=family,
                         font_size=80, font_weight="bold", fill=INK_COLOR,
                         text_anchor="middle"))
        dwg.add(dwg.text(AGENCY_NAME_EN, insert=(width / 2, 335), font_family=family,
                         font_size=40, fill=TITLE_COLOR, text_anchor="middle"))
        dwg.add(dwg.rect(insert=(width / 2 - 320, 390), size=(640, 80), rx=20, ry=20,
                         fill="none", stroke=BRAND_BROWN, stroke_width=4))
        dwg.add(dwg.text(AGENCY_TAGLINE, insert=(width / 2, 441), font_family=family,
                         font_size=30, fill=BRAND_BROWN, text_anchor="middle"))
        return dwg.tostring()

    @staticmethod
    def _new_drawing(width: int, height: int, font: FontAsset) -> svgwrite.Drawing:
        dwg = svgwrite.Drawing(
            size=(width, height), viewBox=f"0 0 {width} {height}", debug=False
        )
        encoded = base64.b64encode(font.data).decode("ascii")
        dwg.embed_stylesheet(
            f"@font-face {{ font-family: '{font.family}'; "
            f"src: url(data:{font.mime_type};base64,{encoded}) format('{font.format}'); "
            "font-weight: 700; font-style: normal; }"
        )
        return dwg

    @staticmethod
    def _font_family(font: FontAsset) -> str:
        return f"'{font.family}', serif"

    @staticmethod
    def _add_header_bar(
        dwg: svgwrite.Drawing, params: PresentationParams, family: str, width: int
    ) -> None:
        dwg.add(dwg.rect(insert=(22, 22), size=(width - 44, 44), fill=params.border_color))
        dwg.add(dwg.text(f"第{params.issue_number}号", insert=(40, 50),
                         font_family=family, font_size=15, fill=PAPER_COLOR))
        dwg.add(dwg.text(f"発行日 {params.issue_date}", insert=(width - 40, 50),
                         font_family=family, font_size=15, fill=PAPER_COLOR,
                         text_anchor="end"))

    @staticmethod
    def _add_label(
        dwg: svgwrite.Drawing,
        label: str,
        *,
        x: float,
        y: float,
        family: str,
        color: str,
        anchor: str = "start",
    ) -> None:
        dwg.add(dwg.text(f"【{label}】", insert=(x, y), font_family=family,
                         font_size=14, fill=color, text_anchor=anchor))

    @staticmethod
    def _add_lines(
        dwg: svgwrite.Drawing,
        lines: list[str],
        *,
        x: float,
        y: float,
        font_size: int,
        family: str,
        fill: str,
        anchor: str = "start",
        bold: bool = False,
        line_height: float = 1.3,
    ) -> None:
        for index, line in enumerate(lines):
            dwg.add(dwg.text(
                line,
                insert=(x, y + index * font_size * line_height),
                font_family=family,
                font_size=font_size,
                font_weight="bold" if bold else "normal",
                fill=fill,
                text_anchor=anchor,
            ))

    @staticmethod
    def _add_stamp(
        dwg: svgwrite.Drawing,
        params: PresentationParams,
        family: str,
        *,
        center: tuple[float, float],
    ) -> None:
        cx, cy = center
        stamp = dwg.g()
        stamp.add(dwg.circle(center=center, r=52, fill="none",
                             stroke=params.stamp_color, stroke_width=5))
        stamp.add(dwg.circle(center=center, r=44, fill="none",
                             stroke=params.stamp_color, stroke_width=1.5))
        stamp.add(dwg.text(params.stamp_label, insert=(cx, cy + 11), font_family=family,
                           font_size=30, font_weight="bold", fill=params.stamp_color,
                           text_anchor="middle"))
        stamp.rotate(-15, center=center)
        dwg.add(stamp)
