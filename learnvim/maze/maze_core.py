"""
Grid search helpers for wall-set mazes
"""

from collections import deque

from learnvim.level.models import Position

# Axis steps: up, right, down, left
STEPS = (Position(0, -1), Position(1, 0), Position(0, 1), Position(-1, 0))


def neighbors_open(maze, pos):
    """Get open cells next to pos inside the maze"""
    res = []
    for step in STEPS:
        nxt = pos + step
        if maze.is_open(nxt):
            res.append(nxt)
    return res


def bfs_reachable(maze, start):
    """
    Collect every open cell reachable from start

    Args:
        maze: Maze object
        start: Absolute Position to flood from

    Returns:
        set of absolute Positions, empty if start is not open
    """
    if not maze.is_open(start):
        return set()

    seen = {start}
    q = deque([start])
    while q:
        cur = q.popleft()
        for n in neighbors_open(maze, cur):
            if n not in seen:
                seen.add(n)
                q.append(n)
    return seen


def reconstruct_path(prev, goal):
    """Reconstruct path from prev dictionary"""
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def bfs_shortest_path(maze, start, goal):
    """BFS shortest path finder, returns [] when goal is unreachable"""
    if start == goal:
        return [start]

    q = deque([start])
    prev = {start: None}

    while q:
        cur = q.popleft()
        for n in neighbors_open(maze, cur):
            if n not in prev:
                prev[n] = cur
                if n == goal:
                    return reconstruct_path(prev, goal)
                q.append(n)
    return []
