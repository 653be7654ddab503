# config.py

# Stores game constants: session length, scoring table, difficulty thresholds, grade bands, etc.

# 1. Session timing
# 2. Scoring and difficulty ranges
# 3. Grade bands
# 4. Window, font and color mapping
# 5. Logging

import os

# 1. Session timing
SESSION_LENGTH = 60                 # seconds
TICK_MS = 1000

LANGUAGES = ("korean", "english")
DEFAULT_LANGUAGE = "korean"
DIFFICULTIES = ("easy", "medium", "hard")

# 2. Scoring
BASE_SCORES = {
    "easy": 10,
    "medium": 20,
    "hard": 30
}
COMBO_STEP = 3                      # every 3 consecutive hits...
COMBO_BONUS = 5                     # ...add 5 points
MISS_PENALTY = 5

# score must be strictly above the threshold (checked before the hit is added)
PROMOTION_THRESHOLDS = {
    "easy": ("medium", 200),
    "medium": ("hard", 500)
}

# word lengths used when building tiers from the nltk corpus
WORD_LENGTH_RANGES = {
    "easy": (3, 4),
    "medium": (6, 8),
    "hard": (9, 13)
}
CORPUS_TIER_SIZE = 50

# 3. Grade bands, highest first: (lowest accuracy in band, grade)
GRADE_BANDS = (
    (76, "Perfect"),
    (51, "Well"),
    (26, "Soso"),
    (0, "Bad")
)

# 4. Window
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 720
FPS = 60
# Hangul needs a font that actually has the glyphs, first match wins
FONT_NAMES = "nanumgothic,malgungothic,applegothic,notosanscjkkr,notosanskr,unifont"

COLORS = {
    "easy": (0, 255, 128),          # Neon Green - Easy
    "medium": (255, 200, 0),        # Golden Yellow - Medium
    "hard": (255, 80, 80),          # Warm Red - Hard
    "border": (255, 120, 0),        # Orange border
    "backdrop": (10, 10, 12),       # Near-black
    "panel": (20, 20, 20),
    "hud_backdrop": (45, 22, 0),    # Dark orange-brown
    "hud_text": (255, 210, 140),    # Warm light orange
    "good": (120, 255, 120),
    "bad": (255, 120, 120),
    "Bad": (255, 150, 60),
    "Soso": (255, 220, 60),
    "Well": (120, 230, 120),
    "Perfect": (200, 140, 255)
}

LANGUAGE_LABELS = {
    "korean": "한글",
    "english": "영어"
}
DIFFICULTY_LABELS = {
    "easy": "쉬움",
    "medium": "보통",
    "hard": "어려움"
}
GRADE_MESSAGES = {
    "Bad": "다음엔 더 잘할 수 있어요!",
    "Soso": "좋아요! 계속 연습해보세요!",
    "Well": "훌륭해요! 정말 잘했어요!",
    "Perfect": "완벽해요! 최고의 실력이에요!"
}

# 5. Logging
LOG_LEVEL = os.environ.get("TYPING_LOG_LEVEL", "INFO")
LOG_FORMAT = "[%(name)s] %(levelname)s %(message)s"
