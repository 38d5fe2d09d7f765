# reviewlens/core/sentiment/lexicon.py
"""Word-polarity tables for the lexicon scorer.

The built-in table follows the AFINN convention: integer weights from -5
(most negative) to +5 (most positive), with a few restaurant-domain terms
added. Words absent from the table contribute nothing to a score.
"""
from __future__ import annotations
from typing import Dict

DEFAULT_WEIGHTS: Dict[str, float] = {
    # --- general positive ---
    "good": 3,
    "great": 3,
    "excellent": 3,
    "amazing": 4,
    "awesome": 4,
    "fantastic": 4,
    "wonderful": 4,
    "fabulous": 4,
    "brilliant": 4,
    "incredible": 4,
    "outstanding": 5,
    "superb": 5,
    "exceptional": 5,
    "perfect": 3,
    "perfectly": 3,
    "best": 3,
    "better": 2,
    "nice": 3,
    "pleasant": 3,
    "lovely": 3,
    "beautiful": 3,
    "love": 3,
    "loved": 3,
    "loves": 3,
    "like": 2,
    "liked": 2,
    "enjoy": 2,
    "enjoyed": 2,
    "happy": 3,
    "glad": 3,
    "pleased": 3,
    "satisfied": 2,
    "impressed": 3,
    "impressive": 3,
    "recommend": 2,
    "recommended": 2,
    "favorite": 2,
    "favourite": 2,
    "fun": 4,
    "fine": 2,
    "solid": 2,
    "gem": 3,
    "thanks": 2,
    "thank": 2,
    # --- general negative ---
    "bad": -3,
    "worse": -3,
    "worst": -3,
    "terrible": -3,
    "awful": -3,
    "horrible": -3,
    "horrendous": -3,
    "dreadful": -3,
    "disgusting": -3,
    "nasty": -3,
    "gross": -2,
    "poor": -2,
    "poorly": -2,
    "mediocre": -2,
    "disappointing": -2,
    "disappointed": -2,
    "disappointment": -2,
    "hate": -3,
    "hated": -3,
    "dislike": -2,
    "unhappy": -2,
    "sad": -2,
    "angry": -3,
    "annoyed": -2,
    "annoying": -2,
    "frustrating": -2,
    "boring": -3,
    "unacceptable": -2,
    "wrong": -2,
    "problem": -2,
    "problems": -2,
    "complaint": -2,
    "fail": -2,
    "failed": -2,
    "regret": -2,
    "avoid": -1,
    "lacking": -2,
    "mess": -2,
    "messy": -2,
    "sick": -2,
    "waste": -1,
    "wasted": -2,
    "never": -1,
    # --- food ---
    "delicious": 3,
    "tasty": 3,
    "yummy": 3,
    "flavorful": 3,
    "flavourful": 3,
    "scrumptious": 3,
    "mouthwatering": 3,
    "fresh": 1,
    "juicy": 2,
    "tender": 2,
    "crispy": 1,
    "bland": -2,
    "tasteless": -2,
    "stale": -2,
    "soggy": -2,
    "greasy": -2,
    "overcooked": -2,
    "undercooked": -2,
    "burnt": -2,
    "inedible": -3,
    "rotten": -3,
    "raw": -1,
    # --- service ---
    "friendly": 2,
    "attentive": 2,
    "polite": 2,
    "courteous": 2,
    "helpful": 2,
    "welcoming": 2,
    "efficient": 2,
    "professional": 2,
    "rude": -2,
    "slow": -1,
    "ignored": -2,
    "unfriendly": -2,
    "unprofessional": -2,
    "careless": -2,
    "arrogant": -2,
    # --- ambiance ---
    "cozy": 2,
    "cosy": 2,
    "charming": 3,
    "comfortable": 2,
    "clean": 2,
    "elegant": 2,
    "relaxing": 2,
    "spacious": 1,
    "dirty": -2,
    "filthy": -3,
    "noisy": -1,
    "loud": -1,
    "cramped": -1,
    "smelly": -2,
    "uncomfortable": -2,
    # --- value ---
    "affordable": 2,
    "worth": 2,
    "bargain": 2,
    "reasonable": 1,
    "overpriced": -3,
    "ripoff": -3,
    "pricey": -1,
    "pricy": -1,
}


def vader_weights() -> Dict[str, float]:
    """Word weights from NLTK's VADER lexicon (range -4..+4).

    The resource is downloaded on first use, like other NLTK corpora.
    """
    import nltk

    try:
        nltk.data.find("sentiment/vader_lexicon.zip")
    except LookupError:
        nltk.download("vader_lexicon", quiet=True)
    from nltk.sentiment import SentimentIntensityAnalyzer

    sia = SentimentIntensityAnalyzer()
    # single-word entries only; emoticons never survive tokenization
    return {w: float(v) for w, v in sia.lexicon.items() if w.isalpha()}
