from collections import deque

# Tile character constants expected from delve.dungeon but we
# keep them duplicated lightly for test independence.
WALL = "W"
FLOOR = "F"
EXIT = "E"
WALKABLE = {FLOOR, EXIT}


def bfs_reachable(grid, start, walkable=frozenset({FLOOR})):
    """Return set of (x,y) tiles reachable from start over ``walkable``."""
    w = len(grid)
    h = len(grid[0])
    sx, sy = start
    if grid[sx][sy] not in walkable:
        return set()
    q = deque([start])
    vis = {start}
    while q:
        x, y = q.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < w and 0 <= ny < h and (nx, ny) not in vis:
                if grid[nx][ny] in walkable:
                    vis.add((nx, ny))
                    q.append((nx, ny))
    return vis


def shortest_path(grid, start, goal, walkable=frozenset(WALKABLE)):
    """Return the list of steps (dx, dy) from start to goal, or None."""
    w = len(grid)
    h = len(grid[0])
    parents = {start: None}
    q = deque([start])
    while q:
        cur = q.popleft()
        if cur == goal:
            break
        for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
            nx, ny = cur[0] + dx, cur[1] + dy
            if 0 <= nx < w and 0 <= ny < h and (nx, ny) not in parents and grid[nx][ny] in walkable:
                parents[(nx, ny)] = cur
                q.append((nx, ny))
    if goal not in parents:
        return None
    steps = []
    node = goal
    while parents[node] is not None:
        prev = parents[node]
        steps.append((node[0] - prev[0], node[1] - prev[1]))
        node = prev
    steps.reverse()
    return steps


def border_cells(size):
    for i in range(size):
        yield (i, 0)
        yield (i, size - 1)
        yield (0, i)
        yield (size - 1, i)
