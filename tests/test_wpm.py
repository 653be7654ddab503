from wpm import calculate_wpm, elapsed_seconds


def test_elapsed_from_time_left_before_final_tick():
    assert elapsed_seconds(60, 1) == 59
    assert elapsed_seconds(60, 30) == 30


def test_elapsed_falls_back_to_session_length():
    assert elapsed_seconds(1, 1) == 1
    assert elapsed_seconds(60, 60) == 60


def test_calculate_wpm():
    assert calculate_wpm(30, 60) == 30
    assert calculate_wpm(8, 59) == 8
    assert calculate_wpm(0, 59) == 0
    assert calculate_wpm(10, 0) == 0
