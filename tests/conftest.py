import pytest

from app.generation.models import GeneratedDocument
from app.rendering.models import FontAsset


@pytest.fixture()
def font_asset() -> FontAsset:
    """A stand-in typeface; the renderer only base64-embeds the bytes."""
    return FontAsset(family="Test Mincho", data=b"\x00\x01\x00\x00fake-ttf")


@pytest.fixture()
def sample_document() -> GeneratedDocument:
    return GeneratedDocument(
        header="特別休暇認定書",
        title="戦略的活動停止",
        description="申請者の倦怠感は組織の持続可能性を守るための自然な防衛反応と認める",
        prescription="昼まで寝ること",
    )
