# wpm.py

# Calculates words per minute for a finished session

# 1. Work out how many seconds were actually played
# 2. Normalize the correct word count to a per-minute rate

from utils import round_half_up


def elapsed_seconds(session_length, time_remaining_before_end):
    """Seconds played, measured from the time left just before the final tick."""
    elapsed = session_length - time_remaining_before_end
    if elapsed <= 0:
        # a one second session ends on its first tick, count the whole session
        return session_length
    return elapsed


def calculate_wpm(correct_words, elapsed):
    """Correct words normalized to a one minute rate, rounded half up."""
    if elapsed <= 0:
        return 0
    return round_half_up(correct_words * (60 / elapsed))
