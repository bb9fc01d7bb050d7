"""
Poker hand models: Suit, Card and Hand types
"""

from typing import Tuple
from enum import Enum
from dataclasses import dataclass


class Suit(Enum):
    """カードのスート"""

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"


# ランクの表記（序数 0-12, 0=2, 12=A）
RANK_SYMBOLS = "23456789TJQKA"

RANK_NAMES = {
    0: "2",
    1: "3",
    2: "4",
    3: "5",
    4: "6",
    5: "7",
    6: "8",
    7: "9",
    8: "10",
    9: "J",
    10: "Q",
    11: "K",
    12: "A",
}

HAND_SIZE = 5


@dataclass(frozen=True)
class Card:
    """トランプカードクラス"""

    # スートの記号マップ
    SUIT_SYMBOLS = {
        Suit.CLUBS: "♣",
        Suit.DIAMONDS: "♦",
        Suit.HEARTS: "♥",
        Suit.SPADES: "♠",
    }

    rank: int
    suit: Suit

    def __post_init__(self):
        if self.rank < 0 or self.rank >= len(RANK_SYMBOLS):
            raise ValueError("Rank must be between 0 and 12")

    @property
    def rank_name(self) -> str:
        """ランクの表示名を取得"""
        return RANK_NAMES[self.rank]

    @property
    def suit_symbol(self) -> str:
        """スートの記号を取得"""
        return self.SUIT_SYMBOLS[self.suit]

    def __str__(self) -> str:
        """カードの文字列表現（例: A♠）"""
        return f"{self.rank_name}{self.suit_symbol}"

    def __repr__(self) -> str:
        return f"Card({self.rank_name}, {self.suit.name.lower()})"


@dataclass(frozen=True)
class Hand:
    """5枚のカードからなるハンド（入力順を保持）"""

    cards: Tuple[Card, ...]

    def __post_init__(self):
        if len(self.cards) != HAND_SIZE:
            raise ValueError(f"A hand must contain exactly {HAND_SIZE} cards")

    @property
    def ranks(self) -> Tuple[int, ...]:
        return tuple(card.rank for card in self.cards)

    @property
    def suits(self) -> Tuple[Suit, ...]:
        return tuple(card.suit for card in self.cards)

    def __str__(self) -> str:
        return " ".join(str(card) for card in self.cards)
