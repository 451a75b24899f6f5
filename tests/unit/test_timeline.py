"""Tests for timeline layout and rendering."""

from gitsandbox.core.state import RepositoryState
from gitsandbox.operations.timeline import (
    ORIGIN_X,
    ORIGIN_Y,
    build_timeline,
    commit_position,
    render_timeline,
)


def test_commit_position():
    assert commit_position(0, 0) == (ORIGIN_X, ORIGIN_Y)
    assert commit_position(1, 2) == (ORIGIN_X + 400, ORIGIN_Y + 200)


def test_empty_state_has_no_lanes():
    assert build_timeline(RepositoryState()) == []
    assert render_timeline([]) == []


def test_unborn_branch_lane():
    lanes = build_timeline(RepositoryState.initialized())
    assert len(lanes) == 1
    assert lanes[0].is_empty
    assert lanes[0].is_current
    assert render_timeline(lanes, color=False) == ['* main  (no commits)']


def test_main_is_lane_zero(initialized_repo, commit_file):
    repo = initialized_repo
    repo.create_branch('alpha')
    repo.switch_branch('alpha')
    commit_file(repo, 'a', 'a', 'on alpha')
    repo.switch_branch('main')
    commit_file(repo, 'm', 'm', 'on main')

    lanes = build_timeline(repo.state)

    assert [lane.branch for lane in lanes] == ['main', 'alpha']
    assert lanes[0].nodes[0].position == (ORIGIN_X, ORIGIN_Y)
    assert lanes[1].nodes[0].position == (ORIGIN_X, ORIGIN_Y + 200)


def test_nodes_oldest_first_with_head_marked(repo_with_commits):
    lane = build_timeline(repo_with_commits.state)[0]
    assert [node.message for node in lane.nodes] == ['First commit', 'Second commit']
    assert [node.is_head for node in lane.nodes] == [False, True]
    assert lane.nodes[1].position == (ORIGIN_X + 200, ORIGIN_Y)


def test_render(repo_with_commits):
    repo_with_commits.create_branch('feature')
    lines = render_timeline(build_timeline(repo_with_commits.state), color=False)
    assert lines == [
        '* main     o c000001 -- o c000002',
        '  feature  o c000001 -- o c000002',
    ]


def test_render_highlights_current_branch(repo_with_commits):
    lines = render_timeline(build_timeline(repo_with_commits.state))
    assert '\x1b[' in lines[0]
