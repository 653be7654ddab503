# utils.py

# Helper functions shared by the game engine and the UI

# 1. Difficulty promotion
# 2. Points, accuracy and grade calculation
# 3. Input cleaning
# 4. Logging setup

import logging
import math
from config import (
    BASE_SCORES,
    COMBO_STEP,
    COMBO_BONUS,
    PROMOTION_THRESHOLDS,
    GRADE_BANDS,
    LOG_LEVEL,
    LOG_FORMAT,
)


# one step up at most, never down
# score is the value before the current hit was added
def next_difficulty(difficulty, score):
    promotion = PROMOTION_THRESHOLDS.get(difficulty)
    if promotion is None:
        return difficulty
    target, threshold = promotion
    if score > threshold:
        return target
    return difficulty


# points for one correct word, combo is the streak before this word
def calculate_points(difficulty, combo):
    return BASE_SCORES[difficulty] + (combo // COMBO_STEP) * COMBO_BONUS


# Math.round semantics: halves go up, unlike python's round()
def round_half_up(value):
    return int(math.floor(value + 0.5))


def calculate_accuracy(correct_count, total_attempts):
    if total_attempts <= 0:
        return 0
    return round_half_up(correct_count / total_attempts * 100)


def calculate_grade(accuracy):
    """Map an accuracy percentage (0-100) to Bad, Soso, Well or Perfect."""
    for lower_bound, grade in GRADE_BANDS:
        if accuracy >= lower_bound:
            return grade
    return GRADE_BANDS[-1][1]


# only surrounding whitespace is ignored, comparison stays case-sensitive
def clean_input(text):
    if text is None:
        return ""
    return text.strip()


def setup_logging(level=LOG_LEVEL):
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)
