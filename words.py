# words.py

# Word bank: the fixed word lists for each language and difficulty tier.

# 1. Static catalog (language -> difficulty -> words)
# 2. Random word selection
# 3. Optional English tiers built from the nltk gutenberg corpus

import logging
import random
import nltk
from nltk.corpus import gutenberg
from config import WORD_LENGTH_RANGES as size_range
from config import CORPUS_TIER_SIZE

logger = logging.getLogger(__name__)

WORD_SETS = {
    "korean": {
        "easy": ["사과", "바나나", "고양이", "강아지", "학교", "집", "물", "불", "하늘", "땅"],
        "medium": ["컴퓨터", "키보드", "마우스", "모니터", "프린터", "스피커", "카메라", "휴대폰", "텔레비전", "라디오"],
        "hard": [
            "프로그래밍",
            "알고리즘",
            "데이터베이스",
            "네트워크",
            "보안",
            "인공지능",
            "머신러닝",
            "블록체인",
            "클라우드",
            "빅데이터",
        ],
    },
    "english": {
        "easy": ["cat", "dog", "sun", "moon", "tree", "book", "pen", "car", "home", "love"],
        "medium": [
            "computer",
            "keyboard",
            "monitor",
            "speaker",
            "camera",
            "network",
            "program",
            "website",
            "internet",
            "software",
        ],
        "hard": [
            "programming",
            "algorithm",
            "database",
            "artificial",
            "intelligence",
            "blockchain",
            "cybersecurity",
            "development",
            "architecture",
            "optimization",
        ],
    },
}


# pick one word uniformly at random for the given language and difficulty
# a missing entry is a bug in the catalog, so the KeyError is left to propagate
def pick_word(language, difficulty, rng=None, catalog=None):
    rng = rng or random
    catalog = catalog or WORD_SETS
    return rng.choice(catalog[language][difficulty])


# split a stream of corpus tokens into difficulty tiers by word length
def bucket_words(words, ranges=size_range, limit=CORPUS_TIER_SIZE):
    tiers = {difficulty: [] for difficulty in ranges}
    seen = set()

    for word in words:
        if not word.isalpha() or not word.islower() or word in seen:     # skip names, punctuation and repeats
            continue
        seen.add(word)
        for difficulty, (min_len, max_len) in ranges.items():
            if min_len <= len(word) <= max_len and len(tiers[difficulty]) < limit:
                tiers[difficulty].append(word)
                break

        if all(len(tier) >= limit for tier in tiers.values()):
            break

    return tiers


# catalog with the English tiers replaced by gutenberg words
# raises LookupError when the corpus is not available and cannot be downloaded
def corpus_catalog(limit=CORPUS_TIER_SIZE, rng=None):
    rng = rng or random
    nltk.download('gutenberg', quiet=True)

    tokens = list(gutenberg.words())
    rng.shuffle(tokens)
    tiers = bucket_words(tokens, limit=limit)

    english = {}
    for difficulty, static_words in WORD_SETS["english"].items():
        if tiers.get(difficulty):
            english[difficulty] = tiers[difficulty]
        else:
            logger.warning("Corpus produced no %s words, keeping the built-in list", difficulty)
            english[difficulty] = list(static_words)

    logger.info("Loaded corpus tiers: %s", {d: len(w) for d, w in english.items()})
    return {"korean": WORD_SETS["korean"], "english": english}
