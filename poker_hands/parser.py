"""
Hand string parser
"""

import logging
from typing import List, Optional

from .card_models import Card, Hand, HAND_SIZE, RANK_SYMBOLS
from .config import DEFAULT_GRAMMAR, HandGrammar

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """ハンド文字列の書式エラー"""

    def __init__(self, reason: str, hand_text: Optional[str] = None):
        self.reason = reason
        self.hand_text = hand_text
        if hand_text is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason}: {hand_text!r}")


def rank_ordinal(symbol: str) -> int:
    """ランク記号を序数（2=0 ... A=12）に変換"""
    index = RANK_SYMBOLS.find(symbol)
    if len(symbol) != 1 or index < 0:
        raise ParseError(f"Unknown rank symbol {symbol!r}")
    return index


def parse(hand_text: str, grammar: Optional[HandGrammar] = None) -> Hand:
    """
    ハンド文字列を Hand に変換

    Args:
        hand_text: "4S 5S 6S 7S 8S" 形式の文字列
        grammar: 書式設定（省略時は DEFAULT_GRAMMAR）

    Returns:
        Hand: 入力順の5枚のカード

    Raises:
        ParseError: トークン数、ランク、スート、トークン長が不正な場合
    """
    grammar = grammar or DEFAULT_GRAMMAR
    tokens = hand_text.split(" ")
    if len(tokens) != HAND_SIZE:
        logger.debug(f"Rejecting hand with {len(tokens)} tokens: {hand_text!r}")
        raise ParseError(
            f"Expected {HAND_SIZE} cards, got {len(tokens)}", hand_text
        )

    cards: List[Card] = []
    for token in tokens:
        card = _parse_card(token, grammar, hand_text)
        if grammar.reject_duplicates and card in cards:
            raise ParseError(f"Duplicate card {token!r}", hand_text)
        cards.append(card)

    hand = Hand(tuple(cards))
    logger.debug(f"Parsed {hand_text!r} as {hand}")
    return hand


def _parse_card(token: str, grammar: HandGrammar, hand_text: str) -> Card:
    """1枚分のトークンをカードに変換"""
    if token.startswith(grammar.ten_alias):
        token = "T" + token[len(grammar.ten_alias):]

    if len(token) != 2:
        raise ParseError(f"Malformed card token {token!r}", hand_text)

    rank_symbol, suit_symbol = token[0], token[1]
    if not grammar.case_sensitive:
        rank_symbol = rank_symbol.upper()

    try:
        rank = rank_ordinal(rank_symbol)
    except ParseError as e:
        raise ParseError(e.reason, hand_text) from e

    suit = grammar.suit_for(suit_symbol)
    if suit is None:
        raise ParseError(f"Unknown suit symbol {suit_symbol!r}", hand_text)

    return Card(rank, suit)
