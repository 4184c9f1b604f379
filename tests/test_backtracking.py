from math import comb, factorial

import pytest

from dsalgo.backtracking import (
    hamiltonian_cycles,
    n_queens,
    rat_in_maze_paths,
    tower_of_hanoi,
)

SOURCE_GRAPH = [
    [0, 1, 0, 0, 0, 0, 0, 1],
    [1, 0, 1, 0, 0, 0, 0, 0],
    [0, 1, 0, 1, 0, 0, 0, 1],
    [0, 0, 1, 0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0, 1, 0, 1],
    [1, 0, 1, 0, 0, 0, 1, 0],
]

SOURCE_MAZE = ["0000", "000X", "000X", "0X00"]


def _complete_graph(n):
    return [[int(i != j) for j in range(n)] for i in range(n)]


def test_hamiltonian_cycles_are_valid():
    cycles = list(hamiltonian_cycles(SOURCE_GRAPH, 0))
    assert cycles
    for cycle in cycles:
        assert len(cycle) == len(SOURCE_GRAPH) + 1
        assert cycle[0] == cycle[-1] == 0
        assert set(cycle) == set(range(len(SOURCE_GRAPH)))
        assert all(SOURCE_GRAPH[u][v] for u, v in zip(cycle, cycle[1:]))


def test_hamiltonian_cycles_come_in_both_directions():
    cycles = {tuple(cycle) for cycle in hamiltonian_cycles(SOURCE_GRAPH, 0)}
    assert cycles == {tuple(reversed(cycle)) for cycle in cycles}


@pytest.mark.parametrize("n", [3, 4, 5])
def test_hamiltonian_cycles_in_complete_graph(n):
    cycles = list(hamiltonian_cycles(_complete_graph(n), 0))
    assert len(cycles) == factorial(n - 1)
    assert len({tuple(cycle) for cycle in cycles}) == len(cycles)


def test_hamiltonian_cycles_none_in_path_graph():
    path = [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    assert list(hamiltonian_cycles(path, 0)) == []


def test_hamiltonian_cycles_rejects_bad_input():
    with pytest.raises(IndexError):
        list(hamiltonian_cycles(SOURCE_GRAPH, 8))
    with pytest.raises(ValueError):
        list(hamiltonian_cycles([[0, 1], [1]], 0))


def _is_valid_board(board, n):
    queens = [(r, c) for r in range(n) for c in range(n) if board[r][c] == 1]
    if len(queens) != n:
        return False
    rows = {r for r, _ in queens}
    cols = {c for _, c in queens}
    diffs = {r - c for r, c in queens}
    sums = {r + c for r, c in queens}
    return len(rows) == len(cols) == len(diffs) == len(sums) == n


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_n_queens_solution_is_valid(n):
    board = n_queens(n)
    assert len(board) == n
    assert all(len(row) == n for row in board)
    assert _is_valid_board(board, n)


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_without_solution(n):
    assert n_queens(n) is None


def test_n_queens_rejects_negative():
    with pytest.raises(ValueError):
        n_queens(-1)


def test_rat_in_maze_paths_are_valid():
    paths = list(rat_in_maze_paths(SOURCE_MAZE))
    assert paths
    for path in paths:
        assert path[0] == (0, 0)
        assert path[-1] == (3, 3)
        for (r1, c1), (r2, c2) in zip(path, path[1:]):
            assert (r2 - r1, c2 - c1) in {(0, 1), (1, 0)}
        assert all(SOURCE_MAZE[r][c] != "X" for r, c in path[:-1])
    assert len({tuple(path) for path in paths}) == len(paths)


def test_rat_in_maze_open_grid_counts_all_monotone_paths():
    maze = ["0000"] * 4
    assert len(list(rat_in_maze_paths(maze))) == comb(6, 3)


def test_rat_in_maze_tries_right_before_down():
    paths = list(rat_in_maze_paths(["00", "00"]))
    assert paths[0][1] == (0, 1)
    assert paths[-1][1] == (1, 0)


def test_rat_in_maze_blocked():
    assert list(rat_in_maze_paths(["X0", "00"])) == []
    assert list(rat_in_maze_paths(["0X", "X0"])) == []


def test_rat_in_maze_rejects_ragged_maze():
    with pytest.raises(ValueError):
        list(rat_in_maze_paths(["000", "00"]))


def test_tower_of_hanoi_single_disk():
    assert list(tower_of_hanoi(1)) == [(1, "A", "C")]


@pytest.mark.parametrize("disks", [0, 1, 2, 3, 5])
def test_tower_of_hanoi_moves_are_legal(disks):
    pegs = {"A": list(range(disks, 0, -1)), "B": [], "C": []}
    moves = list(tower_of_hanoi(disks, "A", "B", "C"))
    assert len(moves) == 2**disks - 1
    for disk, source, target in moves:
        assert pegs[source][-1] == disk
        assert not pegs[target] or pegs[target][-1] > disk
        pegs[target].append(pegs[source].pop())
    assert pegs["C"] == list(range(disks, 0, -1))
    assert pegs["A"] == pegs["B"] == []


def test_tower_of_hanoi_custom_pegs():
    moves = list(tower_of_hanoi(2, "L", "M", "R"))
    assert {peg for _, a, b in moves for peg in (a, b)} <= {"L", "M", "R"}
    assert moves[-1][2] == "R"


def test_tower_of_hanoi_rejects_negative():
    with pytest.raises(ValueError):
        list(tower_of_hanoi(-1))