"""Backtracking searches: Hamiltonian cycles, N queens, maze paths and the Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

BLOCKED = "X"


def hamiltonian_cycles(
    adjacency: Sequence[Sequence[int]], start: int = 0
) -> Iterator[list[int]]:
    """Yield every Hamiltonian cycle through ``start`` in an adjacency matrix.

    A cycle is the list of vertices visited, beginning and ending with
    ``start``. Each cycle is found once in each direction, in depth-first
    order with neighbours tried by ascending index.
    """
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency must be a square matrix")
    if not 0 <= start < size:
        raise IndexError(f"start {start} is outside 0..{size - 1}")

    path = [start]
    visited = {start}

    def extend(vertex: int) -> Iterator[list[int]]:
        if len(path) == size:
            if adjacency[vertex][start]:
                yield path + [start]
            return
        for neighbour, connected in enumerate(adjacency[vertex]):
            if connected and neighbour not in visited:
                visited.add(neighbour)
                path.append(neighbour)
                yield from extend(neighbour)
                path.pop()
                visited.discard(neighbour)

    yield from extend(start)


def n_queens(n: int) -> list[list[int]] | None:
    """Place ``n`` non-attacking queens on an ``n`` by ``n`` board.

    Queens are placed column by column, trying rows from the top. Returns the
    first board found, with 1 marking a queen, or None if there is none.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    rows_by_column: list[int] = []
    used_rows: set[int] = set()
    used_differences: set[int] = set()
    used_sums: set[int] = set()

    def place(column: int) -> bool:
        if column == n:
            return True
        for row in range(n):
            if row in used_rows or row - column in used_differences or row + column in used_sums:
                continue
            used_rows.add(row)
            used_differences.add(row - column)
            used_sums.add(row + column)
            rows_by_column.append(row)
            if place(column + 1):
                return True
            rows_by_column.pop()
            used_rows.discard(row)
            used_differences.discard(row - column)
            used_sums.discard(row + column)
        return False

    if not place(0):
        return None
    board = [[0] * n for _ in range(n)]
    for column, row in enumerate(rows_by_column):
        board[row][column] = 1
    return board


def rat_in_maze_paths(maze: Sequence[Sequence[str]]) -> Iterator[list[tuple[int, int]]]:
    """Yield every path from the top-left to the bottom-right cell moving right or down.

    Cells holding ``"X"`` are walls. A path is the list of ``(row, column)``
    cells it passes through; moving right is tried before moving down. The
    destination cell itself is not checked for a wall.
    """
    rows = len(maze)
    if rows == 0 or len(maze[0]) == 0:
        return
    width = len(maze[0])
    if any(len(row) != width for row in maze):
        raise ValueError("maze rows must all have the same length")
    destination = (rows - 1, width - 1)
    path: list[tuple[int, int]] = []

    def walk(row: int, column: int) -> Iterator[list[tuple[int, int]]]:
        if (row, column) == destination:
            yield path + [destination]
            return
        if row >= rows or column >= width or maze[row][column] == BLOCKED:
            return
        path.append((row, column))
        yield from walk(row, column + 1)
        yield from walk(row + 1, column)
        path.pop()

    yield from walk(0, 0)


def tower_of_hanoi(
    disks: int, source: str = "A", helper: str = "B", target: str = "C"
) -> Iterator[tuple[int, str, str]]:
    """Yield the moves ``(disk, from_peg, to_peg)`` that shift ``disks`` disks to ``target``."""
    if disks < 0:
        raise ValueError("the number of disks must not be negative")
    if disks == 0:
        return
    yield from tower_of_hanoi(disks - 1, source, target, helper)
    yield disks, source, target
    yield from tower_of_hanoi(disks - 1, helper, source, target)