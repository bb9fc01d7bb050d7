"""
Five-card poker hand ranking and winner selection
"""

from .card_models import Card, Hand, Suit
from .config import DEFAULT_GRAMMAR, HandGrammar
from .evaluator import HandCategory, HandEvaluator, RankKey, rank_hand
from .log_setup import setup_logging
from .parser import ParseError, parse, rank_ordinal
from .selector import winning_hands

__all__ = [
    "Card",
    "Hand",
    "Suit",
    "DEFAULT_GRAMMAR",
    "HandGrammar",
    "HandCategory",
    "HandEvaluator",
    "RankKey",
    "rank_hand",
    "setup_logging",
    "ParseError",
    "parse",
    "rank_ordinal",
    "winning_hands",
]
