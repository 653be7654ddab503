# main.py

# Launches the typing practice window.

# 1. Read language / seed / corpus flag from the command line
# 2. Build the word catalog (static, or English tiers from the nltk corpus)
# 3. Hand over to the pygame UI

import sys
import random
import logging
from config import LANGUAGES, DEFAULT_LANGUAGE
from utils import setup_logging
from words import WORD_SETS, corpus_catalog

logger = logging.getLogger("main")

USAGE = "Usage: python main.py [korean|english] [seed] [--corpus]"


def parse_args(argv):
    use_corpus = "--corpus" in argv
    args = [a for a in argv if a != "--corpus"]

    language = args[0] if len(args) > 0 else DEFAULT_LANGUAGE
    if language not in LANGUAGES:
        logger.warning("Unknown language %r, using %s. %s", language, DEFAULT_LANGUAGE, USAGE)
        language = DEFAULT_LANGUAGE

    seed = None
    if len(args) > 1:
        try:
            seed = int(args[1])
        except ValueError:
            logger.warning("Seed must be an integer, got %r. Playing unseeded.", args[1])

    return language, seed, use_corpus


def load_catalog(use_corpus, rng=None):
    if not use_corpus:
        return WORD_SETS
    try:
        return corpus_catalog(rng=rng)
    except (LookupError, OSError) as e:
        logger.warning("Could not load the gutenberg corpus (%s), using built-in words", e)
        return WORD_SETS


def main(argv=None):
    setup_logging()
    language, seed, use_corpus = parse_args(sys.argv[1:] if argv is None else argv)
    rng = random.Random(seed) if seed is not None else None
    catalog = load_catalog(use_corpus, rng=rng)

    # pygame is only needed once a window is opened
    from game_ui import GameUI

    logger.info("Starting (%s, seed=%s, corpus=%s)", language, seed, use_corpus)
    GameUI(language=language, rng=rng, catalog=catalog).run()


if __name__ == "__main__":
    main()
