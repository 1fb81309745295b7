import pytest
from mastermind.engine import GuessRecord, ContradictionError, SpaceExhausted
from mastermind.harness import run_case
from mastermind.solvers import create_solver, get_solver_ids
from mastermind.solvers.ascending import next_guess


def test_registry_lists_solvers():
    assert get_solver_ids() == ["ascending", "ascending_np"]
    with pytest.raises(ValueError):
        create_solver("minimax")


def test_next_guess_empty_history_is_all_zero():
    assert next_guess([], 6, 4) == (0, 0, 0, 0)


def test_next_guess_skips_inconsistent_candidates():
    history = [GuessRecord((0, 0, 0, 0), (1, 0))]
    # smallest code above 0000 with exactly one 0
    assert next_guess(history, 6, 4) == (0, 1, 1, 1)


def test_next_guess_contradiction():
    history = [GuessRecord((0, 0), (2, 0)), GuessRecord((0, 1), (2, 0))]
    with pytest.raises(ContradictionError) as exc:
        next_guess(history, 2, 2)
    assert isinstance(exc.value.__cause__, SpaceExhausted)


@pytest.mark.parametrize("solver_id", ["ascending", "ascending_np"])
def test_solver_contradiction(solver_id):
    solver = create_solver(solver_id)
    solver.reset(k=2, n=2)
    history = [GuessRecord((0, 0), (2, 0)), GuessRecord((0, 1), (2, 0))]
    with pytest.raises(ContradictionError):
        solver.next_guess(history)


@pytest.mark.parametrize("solver_id", ["ascending", "ascending_np"])
def test_solver_first_guess(solver_id):
    solver = create_solver(solver_id)
    solver.reset(k=6, n=4)
    assert solver.first_guess() == (0, 0, 0, 0)
    assert solver.next_guess([GuessRecord((0, 0, 0, 0), (1, 0))]) == (0, 1, 1, 1)


@pytest.mark.parametrize("k,n,secret", [
    (6, 4, (3, 1, 5, 1)),
    (6, 4, (5, 5, 5, 5)),
    (3, 5, (2, 0, 1, 2, 2)),
    (10, 3, (9, 0, 7)),
])
def test_vectorized_solver_matches_reference(k, n, secret):
    ref = run_case(create_solver("ascending"), secret, k=k, n=n)
    fast_solver = create_solver("ascending_np")
    fast_solver.CHUNK = 7  # force many small blocks
    fast = run_case(fast_solver, secret, k=k, n=n)
    assert fast["history"] == ref["history"]
    assert ref["success"] is True
