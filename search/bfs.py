from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Hashable, Iterable, List, Optional, TypeVar

N = TypeVar("N", bound=Hashable)


@dataclass
class SearchResult(Generic[N]):
    dist: Dict[N, int] = field(default_factory=dict)
    parent: Dict[N, N] = field(default_factory=dict)
    found: bool = False


def breadth_first(
    starts: Iterable[N],
    expand: Callable[[N], Iterable[N]],
    goal: Optional[N] = None,
    track_parents: bool = False,
) -> SearchResult[N]:
    """Unweighted (multi-source) BFS.

    Every start is at distance 0 before expansion begins. expand(node) yields the
    admissible neighbors of node; each node is recorded when first touched, which
    in an unweighted graph is its shortest distance to the nearest start.
    With a goal the search stops the moment the goal is discovered.
    """
    res: SearchResult[N] = SearchResult()
    q: deque = deque()
    for s in starts:
        if s in res.dist:
            continue
        res.dist[s] = 0
        q.append(s)
    if goal is not None and goal in res.dist:
        res.found = True
        return res

    while q:
        cur = q.popleft()
        d = res.dist[cur] + 1
        for nb in expand(cur):
            if nb in res.dist:
                continue
            res.dist[nb] = d
            if track_parents:
                res.parent[nb] = cur
            if goal is not None and nb == goal:
                res.found = True
                return res
            q.append(nb)
    return res


def reconstruct(parent: Dict[N, N], goal: N, root: N) -> List[N]:
    """Parent chain from goal back to root, both included (goal first)."""
    path = [goal]
    cur = goal
    while cur != root:
        cur = parent[cur]
        path.append(cur)
    return path
