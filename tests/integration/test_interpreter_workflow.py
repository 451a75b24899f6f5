"""Integration tests for complete command-line workflows."""

import pytest

from gitsandbox.commands.interpreter import CommandInterpreter
from gitsandbox.core.ids import sequential_ids
from gitsandbox.core.objects import FileStatus
from gitsandbox.core.repository import SandboxRepository
from gitsandbox.operations.samples import get_sample


def assert_partition(state):
    """Every path sits in at most one view, matching its status."""
    views = {
        FileStatus.STAGED: state.staged,
        FileStatus.MODIFIED: state.modified,
        FileStatus.UNTRACKED: state.untracked,
    }
    for path, file in state.files.items():
        member_of = [status for status, paths in views.items() if path in paths]
        if file.status in views:
            assert member_of == [file.status]
        else:
            assert member_of == []


def test_basic_workflow(run, repo):
    """init -> create file -> add -> commit."""
    assert run("git init").success
    assert run("echo 'Hello' > README.md").success
    assert run("git add README.md").success

    result = run('git commit -m "Initial commit"')

    assert result.success
    state = repo.state
    assert len(state.commits) == 1
    assert state.head == state.commits[0].sha
    assert state.find_branch('main').head == state.commits[0].sha
    assert state.staged == []
    assert state.files['README.md'].status == FileStatus.TRACKED
    assert state.commits[0].tree == {'README.md': 'Hello'}


def test_init_guard(run, repo):
    run("git init", "touch a.txt")
    before = repo.get_state().to_dict()

    result = run("git init")

    assert not result.success
    assert result.errors == ["fatal: already a git repository"]
    assert repo.get_state().to_dict() == before


def test_duplicate_branch_rejection(run, repo):
    run("git init", "touch a", "git add .", "git commit -m first", "git branch feature")

    result = run("git branch feature")

    assert not result.success
    assert result.errors == ["fatal: A branch named 'feature' already exists."]
    assert len(repo.state.branches) == 2


def test_empty_message_guard(run, repo):
    run("git init", "touch a", "git add a")

    result = run("git commit")

    assert result.errors == ["Aborting commit due to empty commit message."]
    assert repo.state.commits == []


def test_unknown_pathspec(run, repo):
    run("git init", "touch a")
    before = repo.get_state().to_dict()

    result = run("git add nonexistent.txt")

    assert result.errors == ["fatal: pathspec did not match any files"]
    assert repo.get_state().to_dict() == before


def test_merge_always_advances(run, repo):
    run("git init", "touch a", "git add .", "git commit -m first", "git branch feature")
    head_before = repo.state.head
    count_before = len(repo.state.commits)

    result = run("git merge feature")

    assert result.success
    assert len(repo.state.commits) == count_before + 1
    assert repo.state.head != head_before
    assert repo.state.head == repo.state.commits[-1].sha
    assert repo.state.commits[-1].parent == head_before


def test_branch_divergence_and_merge(run, repo):
    run(
        "git init",
        "echo base > base.txt", "git add .", "git commit -m base",
        "git switch -c feature",
        "echo feat > feat.txt", "git add feat.txt", "git commit -m 'feature work'",
        "git checkout main",
        "echo fix > fix.txt", "git add .", "git commit -m 'main fix'",
    )

    result = run("git merge feature")
    assert result.text == "Merged branch 'feature' into main"

    log = run("git log --oneline").text.splitlines()
    assert [line.split(' ', 1)[1] for line in log] == [
        "Merge branch 'feature'",
        "main fix",
        "base",
    ]

    run("git switch feature")
    feature_log = run("git log --oneline").text
    assert "feature work" in feature_log
    assert "main fix" not in feature_log


def test_partition_invariant_throughout(interpreter, repo):
    script = [
        "git init",
        "touch a b c",
        "git add a",
        "echo x > b",
        "git add .",
        "git commit -m one",
        "echo changed > a",
        "touch d",
        "git add a",
        "git restore --staged a",
        "echo again > c",
        "git add c d",
        "git commit -m two",
        "git checkout -b side",
        "echo side > a",
        "git status",
    ]
    for line in script:
        interpreter.execute(line)
        assert_partition(repo.state)


@pytest.mark.parametrize('line', [
    "git init",
    "git add nothing",
    "git commit -m x",
    "git branch main",
    "git checkout nowhere",
    "git switch",
    "git merge",
    "git merge ghost",
    "git restore --staged ghost",
    "git frobnicate",
    "git",
    "rm -rf /",
    "touch",
    "echo",
    "echo hi >",
    'echo "unterminated',
])
def test_failures_leave_state_untouched(run, repo, line):
    run("git init", "touch a", "git add a", "git commit -m first")
    before = repo.get_state().to_dict()

    result = run(line)

    assert not result.success
    assert not result.update_state
    assert result.lines[0].type.value == 'error'
    assert repo.get_state().to_dict() == before


def test_unknown_commands(run):
    result = run("git frobnicate")
    assert result.errors == ["git: 'frobnicate' is not a git command."]
    assert "git --help" in result.lines[1].text

    assert run("git").errors == ["usage: git <command> [<args>]"]

    result = run("ls")
    assert result.errors == ["Command not found: ls"]
    assert result.lines[1].text == "Available commands: touch, echo, git"


def test_empty_input(run):
    result = run("   ")
    assert result.success
    assert result.lines == []


def test_git_help(run):
    text = run("git help").text
    assert "commit" in text
    assert "help" not in text.split("usage:", 1)[1]


def test_quoted_commit_message(run, repo):
    run("git init", "touch a", "git add a")
    result = run('git commit -m "Fix \\"quoted\\" > arrows"')
    assert result.success
    assert repo.state.commits[0].message == 'Fix "quoted" > arrows'


def test_quoted_git_word_is_not_git(run):
    result = run('"git" status')
    assert result.errors == ["Command not found: git"]


def test_parse_error(run):
    result = run("git commit -m 'open")
    assert result.errors == ["parse error: unterminated single quote"]


def test_handler_crash_is_reported_and_rolled_back(repo, monkeypatch):
    interpreter = CommandInterpreter(repo)
    interpreter.execute("git init")
    interpreter.execute("touch a")
    before = repo.get_state().to_dict()

    def explode(self, path):
        self._state.files[path].content = 'half-written'
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(type(repo), 'stage_file', explode)

    result = interpreter.execute("git add a")

    assert not result.success
    assert result.errors == ["error: disk on fire"]
    assert repo.get_state().to_dict() == before


def test_undo_restores_previous_state(undo_interpreter, repo):
    undo_interpreter.execute("git init")
    undo_interpreter.execute("touch a")
    undo_interpreter.execute("git add a")
    undo_interpreter.execute("git status")
    undo_interpreter.execute("git add missing")
    assert repo.snapshot_count == 3

    assert repo.restore()
    assert repo.state.untracked == ['a']
    assert repo.restore()
    assert repo.state.files == {}
    assert repo.restore()
    assert not repo.state.is_initialized
    assert not repo.restore()


def test_sample_then_commands(interpreter, repo):
    repo.load_sample(get_sample('todo-app'))

    result = interpreter.execute("git status")
    assert "modified:   README.md" in result.text

    interpreter.execute("git add .")
    interpreter.execute('git commit -m "Update readme"')
    interpreter.execute("git merge feature/due-dates")

    messages = [c.message for c in repo.get_branch_commits('main')]
    assert messages[-2:] == ["Update readme", "Merge branch 'feature/due-dates'"]


def test_read_only_commands_keep_full_undo_stack():
    repo = SandboxRepository(id_factory=sequential_ids(), max_snapshots=3)
    interpreter = CommandInterpreter(repo, undo=True)
    for line in ("git init", "touch a.txt", "touch b.txt"):
        interpreter.execute(line)
    assert repo.snapshot_count == 3

    interpreter.execute("git status")
    interpreter.execute("git add missing.txt")
    interpreter.execute("touch a.txt")

    assert repo.snapshot_count == 3
    assert repo.restore()
    assert repo.state.untracked == ['a.txt']
    assert repo.restore()
    assert repo.state.files == {}
    assert repo.restore()
    assert not repo.state.is_initialized


def test_apostrophe_in_echo_text(run, repo):
    run("git init")

    assert run("echo don't panic > a.txt").errors == ["parse error: unterminated single quote"]
    assert repo.state.files == {}

    assert run('echo "don\'t panic" > a.txt').success
    assert repo.get_file('a.txt').content == "don't panic"
