# game.py

# Contains the game logic used by the UI: session state, scoring and the timer countdown

# 1. Define SessionState (word, difficulty, score, combo, timer, counts)
# 2. Define SessionResult (score, accuracy, wpm, grade)
# 3. apply_event: pure transition (state, event) -> (new state, result or None)
# 4. GameSession: stateful wrapper driven by the UI, fires on_complete once

import logging
from typing import NamedTuple
from words import pick_word
from utils import (
    next_difficulty,
    calculate_points,
    calculate_accuracy,
    calculate_grade,
    clean_input,
)
from wpm import calculate_wpm, elapsed_seconds
from messages import EVT_START, EVT_SUBMIT, EVT_TICK, start_event, submit_event, tick_event
from config import SESSION_LENGTH, MISS_PENALTY

logger = logging.getLogger(__name__)

STATE_NOT_STARTED = "not_started"
STATE_RUNNING = "running"
STATE_ENDED = "ended"


class SessionState:
    def __init__(self, language, current_word, session_length=SESSION_LENGTH):
        self.language = language
        self.current_word = current_word
        self.difficulty = "easy"
        self.score = 0
        self.combo = 0
        self.time_remaining = session_length
        self.session_length = session_length
        self.correct_count = 0
        self.total_attempts = 0
        self.started = False
        self.ended = False

    @property
    def phase(self):
        if self.ended:
            return STATE_ENDED
        if self.started:
            return STATE_RUNNING
        return STATE_NOT_STARTED

    # fresh state with the first word already drawn
    @staticmethod
    def new(language, session_length=SESSION_LENGTH, rng=None, catalog=None):
        word = pick_word(language, "easy", rng=rng, catalog=catalog)
        return SessionState(language, word, session_length=session_length)

    def copy(self):
        return SessionState.from_dict(self.to_dict())

    # read-only snapshot handed to the presentation layer
    def to_dict(self):
        return {
            "language": self.language,
            "current_word": self.current_word,
            "difficulty": self.difficulty,
            "score": self.score,
            "combo": self.combo,
            "time_remaining": self.time_remaining,
            "session_length": self.session_length,
            "correct_count": self.correct_count,
            "total_attempts": self.total_attempts,
            "started": self.started,
            "ended": self.ended,
            "phase": self.phase,
        }

    @staticmethod
    def from_dict(data: dict):
        state = SessionState(
            language=data["language"],
            current_word=data["current_word"],
            session_length=data.get("session_length", SESSION_LENGTH),
        )
        state.difficulty = data.get("difficulty", "easy")
        state.score = data.get("score", 0)
        state.combo = data.get("combo", 0)
        state.time_remaining = data.get("time_remaining", state.session_length)
        state.correct_count = data.get("correct_count", 0)
        state.total_attempts = data.get("total_attempts", 0)
        state.started = data.get("started", False)
        state.ended = data.get("ended", False)
        return state


class SessionResult(NamedTuple):
    total_score: int
    accuracy: int
    wpm: int
    grade: str

    def to_dict(self):
        return self._asdict()


def _start(state, rng, catalog):
    state.started = True
    state.current_word = pick_word(state.language, state.difficulty, rng=rng, catalog=catalog)
    logger.info("Session started (%s, %ss)", state.language, state.session_length)


def _submit(state, text, rng, catalog):
    state.total_attempts += 1

    if clean_input(text) == state.current_word:
        state.correct_count += 1
        points = calculate_points(state.difficulty, state.combo)
        state.combo += 1
        # promotion looks at the score before this hit is added
        state.difficulty = next_difficulty(state.difficulty, state.score)
        state.score += points
        logger.debug("Hit %r: +%d (combo %d, %s)", state.current_word, points, state.combo, state.difficulty)
    else:
        state.combo = 0
        state.score = max(0, state.score - MISS_PENALTY)
        logger.debug("Miss %r (typed %r)", state.current_word, text)

    state.current_word = pick_word(state.language, state.difficulty, rng=rng, catalog=catalog)


def _tick(state):
    time_before = state.time_remaining
    state.time_remaining = max(0, time_before - 1)
    if state.time_remaining > 0:
        return None

    accuracy = calculate_accuracy(state.correct_count, state.total_attempts)
    wpm = calculate_wpm(state.correct_count, elapsed_seconds(state.session_length, time_before))
    result = SessionResult(
        total_score=state.score,
        accuracy=accuracy,
        wpm=wpm,
        grade=calculate_grade(accuracy),
    )
    state.started = False
    state.ended = True
    logger.info("Session ended: %s", result.to_dict())
    return result


def apply_event(state, event, rng=None, catalog=None):
    """Apply one event to a session state.

    Returns ``(new_state, result)``. The input state is never modified.
    ``result`` is a :class:`SessionResult` only for the tick that ends the
    session, otherwise ``None``. Events that make no sense in the current
    phase (a tick before start, anything after the end) leave the state as is.
    """
    new_state = state.copy()
    if state.ended:
        return new_state, None

    event_type = event.get("type")
    result = None

    if event_type == EVT_START:
        if not state.started:
            _start(new_state, rng, catalog)
    elif event_type == EVT_SUBMIT:
        # the first submission only starts the session and arms the timer
        if not state.started:
            _start(new_state, rng, catalog)
        else:
            _submit(new_state, event.get("text", ""), rng, catalog)
    elif event_type == EVT_TICK:
        if state.started:
            result = _tick(new_state)
    else:
        logger.debug("Ignoring unknown event %r", event_type)

    return new_state, result


class GameSession:
    def __init__(self, language, session_length=SESSION_LENGTH, rng=None, catalog=None, on_complete=None):
        self._rng = rng
        self._catalog = catalog
        self._on_complete = on_complete
        self._state = SessionState.new(language, session_length=session_length, rng=rng, catalog=catalog)
        self._result = None
        self.cancelled = False

    @property
    def state(self):
        return self._state

    @property
    def result(self):
        return self._result

    @property
    def language(self):
        return self._state.language

    def _dispatch(self, event):
        # a cancelled session ignores everything, including late timer ticks
        if self.cancelled:
            return self._state
        self._state, result = apply_event(self._state, event, rng=self._rng, catalog=self._catalog)
        if result is not None and self._result is None:
            self._result = result
            if self._on_complete is not None:
                self._on_complete(result)
        return self._state

    def start(self):
        return self._dispatch(start_event())

    def submit_answer(self, text):
        return self._dispatch(submit_event(text))

    def tick(self):
        return self._dispatch(tick_event())

    # abandon the session (back to home); nothing fires after this
    def cancel(self):
        if not self.cancelled:
            logger.info("Session cancelled with %ss left", self._state.time_remaining)
        self.cancelled = True

    def snapshot(self):
        return self._state.to_dict()
