"""Timeline layout for commit graph views.

Each branch gets its own lane; its commits are placed left to right,
oldest first. The main branch always takes lane 0 so the trunk stays on
top regardless of branch creation order.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from colorama import Fore, Style

from gitsandbox.core.state import DEFAULT_BRANCH, RepositoryState
from gitsandbox.operations.history import walk_history

ORIGIN_X = 100
ORIGIN_Y = 200
COMMIT_SPACING = 200
LANE_SPACING = 200


@dataclass
class TimelineNode:
    """A commit placed on the timeline."""
    sha: str
    short_sha: str
    message: str
    position: Tuple[int, int]
    is_head: bool = False


@dataclass
class TimelineLane:
    """One branch and its commits, oldest first."""
    branch: str
    lane: int
    is_current: bool
    nodes: List[TimelineNode] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.nodes


def commit_position(lane: int, index: int) -> Tuple[int, int]:
    """Canvas coordinates of the index-th commit in a lane."""
    return ORIGIN_X + index * COMMIT_SPACING, ORIGIN_Y + lane * LANE_SPACING


def build_timeline(state: RepositoryState) -> List[TimelineLane]:
    """
    Lay out every branch of a repository state.

    Args:
        state: Repository state to lay out

    Returns:
        List of lanes, main first, then other branches in creation order
    """
    branches = sorted(state.branches, key=lambda b: b.name != DEFAULT_BRANCH)
    lanes = []

    for lane_index, branch in enumerate(branches):
        history = walk_history(state.commits, branch.head)
        nodes = [
            TimelineNode(
                sha=commit.sha,
                short_sha=commit.short_sha,
                message=commit.message,
                position=commit_position(lane_index, i),
                is_head=commit.sha == branch.head,
            )
            for i, commit in enumerate(history)
        ]
        lanes.append(TimelineLane(
            branch=branch.name,
            lane=lane_index,
            is_current=branch.name == state.current_branch,
            nodes=nodes,
        ))

    return lanes


def render_timeline(lanes: List[TimelineLane], color: bool = True) -> List[str]:
    """
    Render lanes as text, one line per branch:

        * main     o a1b2c3d -- o e4f5a6b
          feature  o a1b2c3d -- o 9c8d7e6

    Args:
        lanes: Output of build_timeline()
        color: Highlight the current branch with colorama

    Returns:
        List of lines (empty if there are no branches)
    """
    if not lanes:
        return []

    width = max(len(lane.branch) for lane in lanes)
    lines = []

    for lane in lanes:
        marker = '*' if lane.is_current else ' '
        name = lane.branch.ljust(width)
        if lane.is_empty:
            body = '(no commits)'
        else:
            body = ' -- '.join(f"o {node.short_sha}" for node in lane.nodes)

        line = f"{marker} {name}  {body}"
        if color and lane.is_current:
            line = f"{Fore.GREEN}{line}{Style.RESET_ALL}"
        lines.append(line)

    return lines
