from reviewlens.core.sentiment.categories import CategoryClassifier
from reviewlens.core.sentiment.config import CategoryConfig
from reviewlens.core.sentiment.scorer import LexiconScorer
from reviewlens.core.tokenization.tokenizer import DefaultTokenizer

tokenizer = DefaultTokenizer()
classifier = CategoryClassifier(tokenizer, LexiconScorer())


def classify(text):
    return classifier.classify(tokenizer.split_sentences(text))


def test_unmentioned_categories_are_none():
    cats = classify("The food was delicious.")
    assert cats["food"] > 0
    assert cats["service"] is None
    assert cats["ambiance"] is None
    assert cats["value"] is None


def test_mentioned_but_neutral_is_zero_not_none():
    cats = classify("Checked the menu.")
    assert cats["food"] == 0.0
    assert cats["service"] is None


def test_sentence_counts_toward_every_matching_category():
    cats = classify("The waiter was rude and the price was overpriced.")
    assert cats["service"] is not None
    assert cats["value"] is not None
    assert cats["service"] == cats["value"]
    assert cats["service"] < 0


def test_category_score_is_mean_over_matching_sentences():
    cats = classify("The food was delicious. The food was bland.")
    # +3 and -2 sentences: (0.61 + -0.46) / 2
    assert cats["food"] == 0.08


def test_no_sentences_gives_all_none():
    assert classify("") == {"food": None, "service": None, "ambiance": None, "value": None}


def test_substring_matching_catches_inflections():
    cats = classify("The dishes were lovely.")
    assert cats["food"] is not None


def test_exact_matching_mode():
    exact = CategoryClassifier(
        tokenizer, LexiconScorer(), CategoryConfig(match_mode="exact")
    )
    cats = exact.classify(tokenizer.split_sentences("The dishes were lovely."))
    assert cats["food"] is None
