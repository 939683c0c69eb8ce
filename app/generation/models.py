from dataclasses import dataclass
from enum import Enum


REJECTION_HEADER = "却下通知"


class Register(str, Enum):
    """Narrative verbosity applied to approved certificates."""

    TERSE = "terse"
    NORMAL = "normal"
    VERBOSE = "verbose"


@dataclass(frozen=True)
class Disposition:
    """Outcome of a request: approved with a register, or rejected."""

    rejected: bool
    register: Register | None

    def __post_init__(self) -> None:
        if self.rejected and self.register is not None:
            raise ValueError("A rejected disposition carries no register")
        if not self.rejected and self.register is None:
            raise ValueError("An approved disposition requires a register")

    @classmethod
    def approve(cls, register: Register) -> "Disposition":
        return cls(rejected=False, register=register)

    @classmethod
    def reject(cls) -> "Disposition":
        return cls(rejected=True, register=None)

    def describe(self) -> str:
        if self.register is None:
            return "rejected"
        return f"approved/{self.register.value}"


@dataclass(frozen=True)
class GeneratedDocument:
    """Certificate text produced by the model (or the fallback)."""

    title: str
    description: str
    prescription: str
    header: str | None = None


FALLBACK_DOCUMENT = GeneratedDocument(
    header="緊急休養命令",
    title="判定回路の焼損",
    description="あなたの怠惰に対する情熱が強すぎたため、判定エンジンが処理を放棄しました",
    prescription="何も考えず泥のように眠ること",
)


@dataclass(frozen=True)
class GenerationOutcome:
    """Output of the generation step.

    raw_response is the model text as received ("" when the call failed);
    failure describes why the fallback was used, or None on success.
    """

    document: GeneratedDocument
    raw_response: str = ""
    failure: str | None = None

    @property
    def used_fallback(self) -> bool:
        return self.failure is not None
