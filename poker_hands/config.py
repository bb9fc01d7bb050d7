"""
Hand string grammar settings
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .card_models import RANK_SYMBOLS, Suit


class HandGrammar(BaseModel):
    """ハンド文字列の書式設定"""

    model_config = ConfigDict(frozen=True)

    suits: str = Field(
        default="".join(suit.value for suit in Suit),
        description="Suit symbols in clubs, diamonds, hearts, spades order",
    )
    ten_alias: str = Field(
        default="10", description="Two-character rank token accepted for Ten"
    )
    case_sensitive: bool = Field(
        default=True, description="Reject lowercase rank and suit symbols"
    )
    reject_duplicates: bool = Field(
        default=False, description="Raise on a repeated (rank, suit) card"
    )

    @field_validator("suits")
    @classmethod
    def check_suits(cls, value: str) -> str:
        if len(value) != len(Suit) or len(set(value.upper())) != len(Suit):
            raise ValueError("suits must be 4 distinct characters")
        return value

    @field_validator("ten_alias")
    @classmethod
    def check_ten_alias(cls, value: str, info: ValidationInfo) -> str:
        # 正規化後も「ランク + スート」の2文字になること
        reserved = set(RANK_SYMBOLS) | set(info.data.get("suits", "").upper())
        if len(value) != 2 or any(c.upper() in reserved for c in value):
            raise ValueError(
                "ten_alias must be 2 characters that are not rank or suit symbols"
            )
        return value

    def suit_for(self, symbol: str) -> Optional[Suit]:
        """スート記号から Suit を取得（該当なしは None）"""
        suits = self.suits if self.case_sensitive else self.suits.upper()
        if not self.case_sensitive:
            symbol = symbol.upper()
        index = suits.find(symbol)
        if len(symbol) != 1 or index < 0:
            return None
        return list(Suit)[index]


DEFAULT_GRAMMAR = HandGrammar()
