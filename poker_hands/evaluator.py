"""
Poker hand evaluation system
"""

import logging
from typing import List, Optional, Tuple
from enum import Enum
from collections import Counter
from functools import total_ordering

from .card_models import Hand, RANK_NAMES
from .config import HandGrammar
from .parser import parse

logger = logging.getLogger(__name__)


class HandCategory(Enum):
    """ハンドカテゴリ（強い順）"""

    STRAIGHT_FLUSH = 9
    FOUR_OF_A_KIND = 8
    FULL_HOUSE = 7
    FLUSH = 6
    STRAIGHT = 5
    THREE_OF_A_KIND = 4
    TWO_PAIR = 3
    ONE_PAIR = 2
    HIGH_CARD = 1

    @property
    def display_name(self) -> str:
        """表示名を取得"""
        return CATEGORY_NAMES[self]


CATEGORY_NAMES = {
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
}


@total_ordering
class RankKey:
    """カテゴリとタイブレーク列の組（ハンドの強さの比較キー）"""

    __slots__ = ("category", "tiebreak")

    def __init__(self, category: HandCategory, tiebreak: Tuple[int, ...] = ()):
        object.__setattr__(self, "category", category)
        object.__setattr__(self, "tiebreak", tuple(tiebreak))

    def __setattr__(self, name, value):
        raise AttributeError("RankKey is immutable")

    def __delattr__(self, name):
        raise AttributeError("RankKey is immutable")

    @classmethod
    def minimum(cls) -> "RankKey":
        """どの実ハンドよりも弱いキー"""
        return cls(HandCategory.HIGH_CARD, ())

    def _as_tuple(self):
        return (self.category.value, self.tiebreak)

    def __lt__(self, other):
        """ハンドの強さを比較（弱い方がTrue）"""
        if not isinstance(other, RankKey):
            return NotImplemented
        return self._as_tuple() < other._as_tuple()

    def __eq__(self, other):
        """ハンドの強さが同じかチェック"""
        if not isinstance(other, RankKey):
            return NotImplemented
        return self._as_tuple() == other._as_tuple()

    def __hash__(self):
        return hash(self._as_tuple())

    def __repr__(self):
        return f"RankKey({self.category.name}, {list(self.tiebreak)})"


class HandEvaluator:
    """ハンド評価クラス"""

    @staticmethod
    def classify(hand: Hand) -> RankKey:
        """
        5枚のハンドを評価して RankKey を返す

        Args:
            hand: パース済みのハンド

        Returns:
            RankKey: カテゴリと、グループ順に並べた全カードのランク列
        """
        ranks = hand.ranks
        suits = hand.suits

        is_flush = len(set(suits)) == 1
        is_straight = HandEvaluator._is_straight(ranks)

        # (枚数, ランク) の降順でグループ化
        groups = HandEvaluator._group_ranks(ranks)
        sizes = [count for _, count in groups]
        tiebreak = tuple(rank for rank, count in groups for _ in range(count))

        category = HandEvaluator._category(is_flush, is_straight, sizes)
        key = RankKey(category, tiebreak)
        logger.debug(f"Classified {hand} as {key!r}")
        return key

    @staticmethod
    def _category(is_flush: bool, is_straight: bool, sizes: List[int]) -> HandCategory:
        if is_straight and is_flush:
            return HandCategory.STRAIGHT_FLUSH
        if sizes == [4, 1]:
            return HandCategory.FOUR_OF_A_KIND
        if sizes == [3, 2]:
            return HandCategory.FULL_HOUSE
        if is_flush:
            return HandCategory.FLUSH
        if is_straight:
            return HandCategory.STRAIGHT
        if sizes == [3, 1, 1]:
            return HandCategory.THREE_OF_A_KIND
        if sizes == [2, 2, 1]:
            return HandCategory.TWO_PAIR
        if sizes == [2, 1, 1, 1]:
            return HandCategory.ONE_PAIR
        return HandCategory.HIGH_CARD

    @staticmethod
    def _group_ranks(ranks: Tuple[int, ...]) -> List[Tuple[int, int]]:
        """(ランク, 枚数) を枚数降順、ランク降順で返す"""
        rank_counts = Counter(ranks)
        return sorted(
            rank_counts.items(), key=lambda item: (item[1], item[0]), reverse=True
        )

    @staticmethod
    def _is_straight(ranks: Tuple[int, ...]) -> bool:
        """ストレートかどうかをチェック（Aはハイのみ）"""
        sorted_ranks = sorted(set(ranks))

        if len(sorted_ranks) != 5:
            return False

        return sorted_ranks[4] - sorted_ranks[0] == 4

    @staticmethod
    def compare_hands(key1: RankKey, key2: RankKey) -> int:
        """
        2つのハンドを比較

        Returns:
            1: key1が勝ち
            -1: key2が勝ち
            0: 引き分け
        """
        if key1 > key2:
            return 1
        elif key1 < key2:
            return -1
        return 0

    @staticmethod
    def describe(key: RankKey) -> str:
        """RankKey の説明文を生成（例: Full House: 2s over 8s）"""
        names = [RANK_NAMES[rank] for rank in key.tiebreak]
        category = key.category
        if not names:
            return category.display_name

        if category in (
            HandCategory.STRAIGHT_FLUSH,
            HandCategory.STRAIGHT,
            HandCategory.FLUSH,
        ):
            return f"{category.display_name}: {names[0]}-high"
        if category == HandCategory.FULL_HOUSE:
            return f"{category.display_name}: {names[0]}s over {names[3]}s"
        if category == HandCategory.TWO_PAIR:
            return f"{category.display_name}: {names[0]}s and {names[2]}s"
        if category in (
            HandCategory.FOUR_OF_A_KIND,
            HandCategory.THREE_OF_A_KIND,
            HandCategory.ONE_PAIR,
        ):
            return f"{category.display_name}: {names[0]}s"
        return f"{category.display_name}: {names[0]}"


def rank_hand(hand_text: str, grammar: Optional[HandGrammar] = None) -> RankKey:
    """ハンド文字列をパースして評価"""
    return HandEvaluator.classify(parse(hand_text, grammar))
