"""Operations module for read-side and loading logic.

This module contains:
- History traversal (branch commit chains)
- Timeline layout for graph views
- Sample repository loading
"""

from gitsandbox.operations.history import walk_history, resolve_branch_commits
from gitsandbox.operations.timeline import TimelineLane, TimelineNode, build_timeline, render_timeline
from gitsandbox.operations.samples import (
    SampleRepository,
    get_sample,
    list_samples,
    load_sample_file,
    parse_sample,
)

__all__ = [
    'walk_history', 'resolve_branch_commits',
    'TimelineLane', 'TimelineNode', 'build_timeline', 'render_timeline',
    'SampleRepository', 'get_sample', 'list_samples', 'load_sample_file', 'parse_sample',
]
