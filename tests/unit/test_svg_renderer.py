"""Tests for the SVG certificate and social-preview layouts."""

import base64
import xml.etree.ElementTree as ET

from app.generation.models import Disposition, GeneratedDocument, Register
from app.presentation.mapper import map_presentation
from app.rendering.models import FontAsset
from app.rendering.svg_renderer import AGENCY_NAME, SvgRenderer

_SVG_NS = "{http://www.w3.org/2000/svg}"


def _texts(svg: str) -> list[str]:
    root = ET.fromstring(svg)
    return [el.text or "" for el in root.iter(f"{_SVG_NS}text")]


def _render(document: GeneratedDocument, font: FontAsset, disposition: Disposition | None = None) -> str:
    disposition = disposition or Disposition.approve(Register.NORMAL)
    params = map_presentation(disposition, document)
    return SvgRenderer().render_certificate(params, document, font)


class TestCertificate:
    def test_has_fixed_dimensions(self, sample_document: GeneratedDocument, font_asset: FontAsset) -> None:
        root = ET.fromstring(_render(sample_document, font_asset))
        assert root.get("width") == "600"
        assert root.get("height") == "800"
        assert root.get("viewBox") == "0 0 600 800"

    def test_contains_document_fields(self, sample_document: GeneratedDocument, font_asset: FontAsset) -> None:
        texts = _texts(_render(sample_document, font_asset))
        assert sample_document.header in texts
        assert sample_document.title in texts
        assert sample_document.prescription in texts
        joined = "".join(texts)
        assert sample_document.description in joined

    def test_contains_issue_header_bar(self, sample_document: GeneratedDocument, font_asset: FontAsset) -> None:
        params = map_presentation(Disposition.approve(Register.TERSE), sample_document)
        svg = SvgRenderer().render_certificate(params, sample_document, font_asset)
        texts = _texts(svg)
        assert f"第{params.issue_number}号" in texts
        assert f"発行日 {params.issue_date}" in texts

    def test_embeds_font_as_data_uri(self, sample_document: GeneratedDocument, font_asset: FontAsset) -> None:
        svg = _render(sample_document, font_asset)
        encoded = base64.b64encode(font_asset.data).decode("ascii")
        assert f"data:font/ttf;base64,{encoded}" in svg
        assert "font-family: 'Test Mincho'" in svg

    def test_stamp_and_watermark_follow_disposition(
        self, sample_document: GeneratedDocument, font_asset: FontAsset
    ) -> None:
        approved = _texts(_render(sample_document, font_asset))
        rejected = _texts(_render(sample_document, font_asset, Disposition.reject()))
        assert "承認" in approved and "APPROVED" in approved
        assert "却下" in rejected and "REJECTED" in rejected

    def test_escapes_hostile_model_text(self, font_asset: FontAsset) -> None:
        hostile = GeneratedDocument(
            title="</text><script>alert(1)</script>",
            description="a & b",
            prescription="<b>",
        )
        svg = _render(hostile, font_asset)
        assert "<script>" not in svg
        texts = _texts(svg)
        assert hostile.title in texts
        assert "a & b" in texts

    def test_long_fields_are_bounded(self, font_asset: FontAsset) -> None:
        document = GeneratedDocument(
            header="超" * 40, title="長" * 80, description="あ" * 600, prescription="寝" * 90,
        )
        texts = _texts(_render(document, font_asset))
        assert len([t for t in texts if t.startswith("あ")]) <= 7
        assert len([t for t in texts if t.startswith("長")]) <= 2
        assert len([t for t in texts if t.startswith("寝")]) <= 2

    def test_output_is_well_formed_xml(self, sample_document: GeneratedDocument, font_asset: FontAsset) -> None:
        ET.fromstring(_render(sample_document, font_asset))


class TestOgImage:
    def test_has_fixed_dimensions(self, font_asset: FontAsset) -> None:
        root = ET.fromstring(SvgRenderer().render_og_image(font_asset))
        assert root.get("width") == "1200"
        assert root.get("height") == "630"

    def test_contains_static_branding(self, font_asset: FontAsset) -> None:
        texts = _texts(SvgRenderer().render_og_image(font_asset))
        assert AGENCY_NAME in texts
        assert "Official Excuse Agency" in texts
