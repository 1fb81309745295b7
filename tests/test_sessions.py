import pytest
from mastermind.engine import ContradictionError, SessionStateError, is_consistent
from mastermind.sessions import (
    CodebreakerSession, BreakerState, CodemakerSession, MakerState,
)


def test_codebreaker_plays_known_game():
    s = CodebreakerSession(2, 2)
    assert s.state is BreakerState.INIT
    assert s.start() == (0, 0)
    assert s.state is BreakerState.AWAITING_FEEDBACK
    assert s.receive((1, 0)) == (0, 1)
    assert s.receive((0, 2)) == (1, 0)
    assert s.receive((2, 0)) is None
    assert s.state is BreakerState.DONE
    assert s.finished is True
    # the winning round is not recorded
    assert [r.guess for r in s.history] == [(0, 0), (0, 1)]


def test_codebreaker_first_move_then_skip():
    s = CodebreakerSession(6, 4)
    assert s.start() == (0, 0, 0, 0)
    assert s.receive((1, 0)) == (0, 1, 1, 1)


def test_codebreaker_guess_consistent_with_history():
    s = CodebreakerSession(6, 4)
    s.start()
    for fb in [(1, 0), (1, 1), (0, 2)]:
        guess = s.receive(fb)
        assert is_consistent(guess, s.history, 6, 4)


def test_codebreaker_contradiction_is_fatal():
    s = CodebreakerSession(2, 2)
    s.start()
    with pytest.raises(ContradictionError):
        s.receive((1, 1))
    assert s.state is BreakerState.CONTRADICTION_FATAL
    with pytest.raises(SessionStateError):
        s.receive((1, 0))


def test_codebreaker_rejects_out_of_order_calls():
    s = CodebreakerSession(3, 2)
    with pytest.raises(SessionStateError):
        s.receive((0, 0))
    s.start()
    with pytest.raises(SessionStateError):
        s.start()


def test_codebreaker_history_snapshot_is_immutable():
    s = CodebreakerSession(3, 2)
    s.start()
    s.receive((0, 0))
    snap = s.history
    assert isinstance(snap, tuple)
    s.receive((0, 0))
    assert len(snap) == 1 and len(s.history) == 2


def test_codemaker_scores_and_finishes():
    m = CodemakerSession([0, 1, 2, 3], 6, 4)
    assert m.respond((0, 0, 0, 0)) == (1, 0)
    assert m.state is MakerState.AWAITING_GUESS
    assert m.respond((3, 2, 1, 0)) == (0, 4)
    assert m.respond((0, 1, 2, 3)) == (4, 0)
    assert m.state is MakerState.DONE
    assert m.rounds == 3
    with pytest.raises(SessionStateError):
        m.respond((0, 1, 2, 3))


def test_codemaker_secret_is_a_copy():
    secret = [1, 1, 0]
    m = CodemakerSession(secret, 2, 3)
    secret[0] = 0
    assert m.secret == (1, 1, 0)
