import pytest

from sudokucp.core.csp import SudokuSolver, forward_check, solve, undo_removals
from sudokucp.core.domains import copy_domains, initial_domains
from sudokucp.core.grid import is_solved
from sudokucp.core.model import InvalidPuzzleError, Unit

from boards import blank_rows, load


def test_forward_check_prunes_open_neighbors():
    grid = load("classic").grid
    domains = initial_domains(grid)
    grid[0][2] = 4
    domains[0][2] = {4}

    removals = forward_check(grid, domains, (0, 2), 4)
    assert removals
    assert all(value == 4 for _, value in removals)
    for (r, c), _ in removals:
        assert grid[r][c] == 0
        assert 4 not in domains[r][c]

    undo_removals(domains, removals)
    for (r, c), _ in removals:
        assert 4 in domains[r][c]


def test_forward_check_rolls_back_on_wipeout():
    grid = [[0] * 9 for _ in range(9)]
    domains = initial_domains(grid)
    domains[0][1] = {2, 3}
    domains[0][5] = {3}
    before = copy_domains(domains)

    grid[0][0] = 3
    assert forward_check(grid, domains, (0, 0), 3) is None
    assert domains == before


def test_classic_puzzle_solves_to_known_solution():
    puzzle = load("classic")
    assert solve(puzzle.grid)
    assert puzzle.grid == puzzle.solution


def test_result_is_a_valid_completion_of_the_givens():
    puzzle = load("classic")
    givens = [row[:] for row in puzzle.grid]
    assert solve(puzzle.grid)
    assert is_solved(puzzle.grid)
    for r in range(9):
        for c in range(9):
            if givens[r][c]:
                assert puzzle.grid[r][c] == givens[r][c]


def test_already_solved_board_is_returned_unchanged():
    grid = load("solved").grid
    before = [row[:] for row in grid]
    solver = SudokuSolver(grid)
    assert solver.solve()
    assert grid == before
    assert solver.stats.assignments == 0


def test_unsatisfiable_board_is_left_untouched():
    grid = load("unsatisfiable").grid
    before = [row[:] for row in grid]
    solver = SudokuSolver(grid)
    assert not solver.solve()
    assert grid == before
    assert solver.stats.assignments > 0


def test_board_rejected_by_propagation_is_left_untouched():
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [1, 2, 3, 4, 5, 6, 7, 0, 0]
    grid[3][7] = 9
    grid[6][8] = 9
    before = [row[:] for row in grid]
    solver = SudokuSolver(grid)
    assert not solver.solve()
    assert grid == before
    assert solver.stats.assignments == 0


def test_failed_search_restores_grid_and_domains():
    grid = load("unsatisfiable").grid
    solver = SudokuSolver(grid)
    assert solver.propagate()
    grid_before = [row[:] for row in grid]
    domains_before = copy_domains(solver.domains)

    assert not solver.backtrack()
    assert grid == grid_before
    assert solver.domains == domains_before


def test_duplicate_givens_raise():
    with pytest.raises(InvalidPuzzleError) as info:
        solve(load("duplicate_row").grid)
    assert info.value.unit is Unit.ROW


def test_solve_is_deterministic():
    solution = load("classic").solution
    first = blank_rows(solution, [0, 1, 2, 4])
    second = [row[:] for row in first]
    assert solve(first)
    assert solve(second)
    assert first == second
    assert is_solved(first)


def test_sessions_do_not_share_state():
    a = load("classic")
    b = load("unsatisfiable")
    solver_a = SudokuSolver(a.grid)
    solver_b = SudokuSolver(b.grid)
    assert not solver_b.solve()
    assert solver_a.solve()
    assert a.grid == a.solution
    assert solver_a.domains is not solver_b.domains


@pytest.mark.slow
def test_seventeen_clue_puzzle():
    puzzle = load("seventeen")
    assert sum(v != 0 for row in puzzle.grid for v in row) == 17
    assert solve(puzzle.grid)
    assert puzzle.grid == puzzle.solution
