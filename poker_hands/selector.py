"""
Winner selection among several hands
"""

import logging
from functools import reduce
from typing import List, Optional, Sequence, Tuple

from .config import HandGrammar
from .evaluator import RankKey, rank_hand

logger = logging.getLogger(__name__)

_Winners = Tuple[RankKey, Tuple[str, ...]]


def winning_hands(
    hands: Sequence[str], grammar: Optional[HandGrammar] = None
) -> List[str]:
    """
    最強ハンド（同点なら全て）を入力順で返す

    Args:
        hands: ハンド文字列のリスト
        grammar: 書式設定（省略時は DEFAULT_GRAMMAR）

    Returns:
        List[str]: 最大の RankKey を持つハンド文字列

    Raises:
        ParseError: いずれかのハンドがパースできない場合
    """
    # 1枚だけなら評価せずにそのまま返す
    if len(hands) == 1:
        return list(hands)

    def step(acc: _Winners, hand: str) -> _Winners:
        best, winners = acc
        key = rank_hand(hand, grammar)
        if key > best:
            return key, (hand,)
        if key == best:
            return best, winners + (hand,)
        return acc

    best, winners = reduce(step, hands, (RankKey.minimum(), ()))
    logger.debug(f"Best key {best!r} shared by {len(winners)} of {len(hands)} hands")
    return list(winners)
