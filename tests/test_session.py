import pytest

from hackassist.session import HELP_TEXT, HackingSession


def _filled(*words):
    session = HackingSession()
    for word in words:
        session.add_word(word)
    return session


def test_add_word_uppercases():
    session = HackingSession()
    assert session.add_word("healing") == "HEALING"
    assert session.current_words == {"HEALING"}


def test_first_word_fixes_length():
    session = _filled("healing")
    assert session.min_length == len("healing")
    assert session.max_length == len("healing")


def test_add_word_rejects_other_length():
    session = _filled("healing")
    with pytest.raises(ValueError):
        session.add_word("fire")
    assert session.current_words == {"HEALING"}


def test_add_word_rejects_too_short_first_word():
    with pytest.raises(ValueError):
        HackingSession().add_word("abc")


def test_add_word_rejects_too_long_first_word():
    with pytest.raises(ValueError):
        HackingSession().add_word("a" * 16)


def test_add_word_rejects_empty():
    with pytest.raises(ValueError):
        HackingSession().add_word("   ")


def test_duplicate_words_kept_once():
    session = _filled("ceiling", "CEILING")
    assert session.current_words == {"CEILING"}


def test_finish_copies_current_words():
    session = _filled("ceiling", "special", "looking")
    remaining = session.finish()
    assert remaining == {"CEILING", "SPECIAL", "LOOKING"}
    assert session.remaining_words == session.current_words


def test_submit_exact_match_leaves_only_guess():
    session = _filled("healing", "legions")
    session.finish()
    assert session.submit_guess("healing", len("healing")) == {"HEALING"}


def test_submit_guess_result_is_subset():
    session = _filled("ceiling", "special", "looking")
    session.finish()
    before = set(session.remaining_words)
    after = session.submit_guess("ceiling", 0)
    assert after <= before
    assert "CEILING" not in after


def test_submit_guess_rejects_wrong_length():
    session = _filled("healing")
    session.finish()
    with pytest.raises(ValueError):
        session.submit_guess("fire", 1)


def test_submit_guess_rejects_count_out_of_range():
    session = _filled("healing")
    session.finish()
    with pytest.raises(ValueError):
        session.submit_guess("healing", len("healing") + 1)
    with pytest.raises(ValueError):
        session.submit_guess("healing", -1)


def test_reset_clears_lists():
    session = _filled("healing", "legions")
    session.finish()
    session.reset()
    assert session.current_words == set()
    assert session.remaining_words == set()
    assert session.max_length == 15


def test_reset_allows_new_length():
    session = _filled("healing")
    session.reset()
    assert session.add_word("truck") == "TRUCK"
    assert session.max_length == len("truck")


def test_help_toggle():
    session = HackingSession()
    assert session.help_text() is None
    assert session.toggle_help() is True
    assert session.help_text() == HELP_TEXT
    assert session.toggle_help() is False
    assert session.help_text() is None


def test_help_text_mentions_restart():
    session = HackingSession()
    session.toggle_help()
    assert "[RESTART]" in session.help_text()