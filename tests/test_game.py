import random

from game import (
    GameSession,
    SessionState,
    SessionResult,
    apply_event,
    STATE_NOT_STARTED,
    STATE_RUNNING,
    STATE_ENDED,
)
from messages import start_event, submit_event, tick_event
from words import WORD_SETS


def hit(session):
    return session.submit_answer(session.state.current_word)


def miss(session):
    return session.submit_answer("definitely not a word")


def test_new_session_defaults(session):
    state = session.state
    assert state.difficulty == "easy"
    assert state.score == 0
    assert state.combo == 0
    assert state.time_remaining == 60
    assert state.correct_count == 0
    assert state.total_attempts == 0
    assert not state.started and not state.ended
    assert state.phase == STATE_NOT_STARTED
    assert state.current_word in WORD_SETS["english"]["easy"]


def test_first_submit_only_starts(session):
    state = session.submit_answer(session.state.current_word)
    assert state.phase == STATE_RUNNING
    assert state.total_attempts == 0
    assert state.score == 0
    assert state.combo == 0


def test_start_is_idempotent(session):
    session.start()
    word_count = session.state.total_attempts
    session.start()
    assert session.state.started
    assert session.state.total_attempts == word_count


def test_tick_before_start_is_ignored(session):
    session.tick()
    assert session.state.time_remaining == 60
    assert session.state.phase == STATE_NOT_STARTED


def test_correct_answer_scores_and_counts(running_session):
    state = hit(running_session)
    assert state.score == 10
    assert state.combo == 1
    assert state.correct_count == 1
    assert state.total_attempts == 1


def test_answer_is_trimmed_but_case_sensitive(make_state):
    state, _ = apply_event(make_state(), submit_event("  cat \n"), rng=random.Random(0))
    assert state.correct_count == 1

    state, _ = apply_event(make_state(), submit_event("CAT"), rng=random.Random(0))
    assert state.correct_count == 0
    assert state.total_attempts == 1


def test_combo_resets_on_miss(running_session):
    for _ in range(4):
        hit(running_session)
    assert running_session.state.combo == 4
    state = miss(running_session)
    assert state.combo == 0
    assert state.total_attempts == 5
    assert state.correct_count == 4


def test_score_never_negative(running_session):
    for _ in range(10):
        state = miss(running_session)
        assert state.score == 0
        assert state.combo == 0


def test_miss_subtracts_penalty(make_state):
    state, _ = apply_event(make_state(score=42, combo=3), submit_event("dog"))
    assert state.score == 37
    assert state.combo == 0


def test_scenario_easy_combo_two(make_state):
    state, _ = apply_event(make_state(score=50, combo=2), submit_event("cat"))
    assert state.score == 60
    assert state.combo == 3


def test_scenario_medium_combo_five(make_state):
    state, _ = apply_event(
        make_state(current_word="camera", difficulty="medium", score=300, combo=5),
        submit_event("camera"),
    )
    assert state.score == 325
    assert state.combo == 6


def test_scenario_zero_score_miss(make_state):
    state, _ = apply_event(make_state(score=0, combo=4), submit_event("dog"))
    assert state.score == 0
    assert state.combo == 0


def test_scenario_promotion_uses_previous_score(make_state):
    state, _ = apply_event(make_state(score=205), submit_event("cat"), rng=random.Random(3))
    assert state.score == 215
    assert state.difficulty == "medium"
    assert state.current_word in WORD_SETS["english"]["medium"]


def test_no_promotion_at_threshold(make_state):
    state, _ = apply_event(make_state(score=200), submit_event("cat"))
    assert state.difficulty == "easy"
    assert state.score == 210


def test_promotion_never_skips_medium(make_state):
    state, _ = apply_event(make_state(score=900), submit_event("cat"))
    assert state.difficulty == "medium"


def test_medium_promotes_to_hard(make_state):
    state, _ = apply_event(
        make_state(current_word="camera", difficulty="medium", score=501),
        submit_event("camera"),
    )
    assert state.difficulty == "hard"
    assert state.current_word in WORD_SETS["english"]["hard"]


def test_miss_never_changes_difficulty(make_state):
    state, _ = apply_event(make_state(difficulty="hard", score=800, current_word="database"), submit_event("x"))
    assert state.difficulty == "hard"
    assert state.current_word in WORD_SETS["english"]["hard"]


def test_difficulty_is_monotonic_over_a_long_run():
    order = {"easy": 0, "medium": 1, "hard": 2}
    session = GameSession("korean", rng=random.Random(7))
    session.start()
    seen = [session.state.difficulty]
    choices = random.Random(11)
    for _ in range(200):
        if choices.random() < 0.8:
            hit(session)
        else:
            miss(session)
        seen.append(session.state.difficulty)
        assert session.state.score >= 0
        assert session.state.combo >= 0
    assert all(order[a] <= order[b] for a, b in zip(seen, seen[1:]))
    assert seen[-1] == "hard"


def test_new_word_comes_from_current_tier(running_session):
    for _ in range(30):
        state = miss(running_session)
        assert state.current_word in WORD_SETS["english"][state.difficulty]


def test_apply_event_does_not_mutate_input(make_state):
    original = make_state(score=20)
    before = original.to_dict()
    new_state, result = apply_event(original, submit_event("cat"))
    assert original.to_dict() == before
    assert new_state is not original
    assert result is None


def test_unknown_event_is_ignored(make_state):
    original = make_state(score=20)
    new_state, result = apply_event(original, {"type": "pause"})
    assert new_state.to_dict() == original.to_dict()
    assert result is None


def test_tick_counts_down(running_session):
    running_session.tick()
    running_session.tick()
    assert running_session.state.time_remaining == 58


def test_session_ends_after_sixty_ticks(running_session):
    results = []
    running_session._on_complete = results.append
    for _ in range(8):
        hit(running_session)
    for _ in range(2):
        miss(running_session)
    for _ in range(59):
        running_session.tick()
    assert running_session.result is None
    assert running_session.state.time_remaining == 1

    running_session.tick()
    state = running_session.state
    assert state.ended
    assert not state.started
    assert state.phase == STATE_ENDED
    assert state.time_remaining == 0
    assert results == [running_session.result]

    result = running_session.result
    assert result.accuracy == 80
    assert result.grade == "Perfect"
    # elapsed is measured from the time left before the last tick: 60 - 1
    assert result.wpm == 8
    assert result.total_score == state.score


def test_result_without_attempts():
    state = SessionState.from_dict({"language": "english", "current_word": "cat", "started": True, "time_remaining": 1})
    ended, result = apply_event(state, tick_event())
    assert result == SessionResult(total_score=0, accuracy=0, wpm=0, grade="Bad")
    assert ended.ended


def test_one_second_session_uses_full_length_for_wpm():
    state = SessionState.from_dict({
        "language": "english",
        "current_word": "cat",
        "started": True,
        "session_length": 1,
        "time_remaining": 1,
        "correct_count": 3,
        "total_attempts": 3,
    })
    _, result = apply_event(state, tick_event())
    assert result.wpm == 180
    assert result.accuracy == 100


def test_accuracy_rounds_half_up():
    state = SessionState.from_dict({
        "language": "english",
        "current_word": "cat",
        "started": True,
        "time_remaining": 1,
        "correct_count": 1,
        "total_attempts": 8,
    })
    _, result = apply_event(state, tick_event())
    assert result.accuracy == 13
    assert result.grade == "Bad"


def test_ended_session_is_frozen(running_session):
    completed = []
    running_session._on_complete = completed.append
    hit(running_session)
    for _ in range(60):
        running_session.tick()
    frozen = running_session.snapshot()
    result = running_session.result

    for _ in range(5):
        running_session.tick()
        hit(running_session)
        miss(running_session)
        running_session.start()

    assert running_session.snapshot() == frozen
    assert running_session.result is result
    assert completed == [result]


def test_apply_event_after_end_returns_no_result(make_state):
    ended = make_state(started=False, ended=True, time_remaining=0, score=40)
    for event in (start_event(), submit_event("cat"), tick_event()):
        state, result = apply_event(ended, event)
        assert state.to_dict() == ended.to_dict()
        assert result is None


def test_cancelled_session_ignores_ticks(running_session):
    completed = []
    running_session._on_complete = completed.append
    running_session.tick()
    running_session.cancel()
    for _ in range(100):
        running_session.tick()
    hit(running_session)
    assert running_session.state.time_remaining == 59
    assert running_session.state.total_attempts == 0
    assert running_session.result is None
    assert completed == []


def test_seeded_sessions_are_deterministic():
    words = []
    for _ in range(2):
        session = GameSession("korean", rng=random.Random(99))
        session.start()
        drawn = [session.state.current_word]
        for _ in range(10):
            miss(session)
            drawn.append(session.state.current_word)
        words.append(drawn)
    assert words[0] == words[1]


def test_custom_catalog_is_used():
    catalog = {
        "english": {"easy": ["alpha"], "medium": ["bravo"], "hard": ["charlie"]},
        "korean": WORD_SETS["korean"],
    }
    session = GameSession("english", catalog=catalog)
    session.start()
    assert session.state.current_word == "alpha"
    session.submit_answer("alpha")
    assert session.state.current_word == "alpha"


def test_snapshot_round_trips(running_session):
    hit(running_session)
    snapshot = running_session.snapshot()
    assert snapshot["phase"] == STATE_RUNNING
    assert SessionState.from_dict(snapshot).to_dict() == snapshot


def test_result_to_dict():
    result = SessionResult(total_score=120, accuracy=75, wpm=14, grade="Well")
    assert result.to_dict() == {"total_score": 120, "accuracy": 75, "wpm": 14, "grade": "Well"}
