import pytest

from minigit.branch import BranchManager
from minigit.commit import CommitStore
from minigit.errors import MinigitError
from minigit.merge import Merger
from minigit.repository import Repository


def _commit_file(root, name, text, message):
    (root / name).write_text(text)
    Repository(root).add(name)
    return CommitStore(root).commit(message)


def _tip(root, branch):
    return (root / ".minigit" / "branches" / branch).read_text()


@pytest.fixture
def history(tmp_path):
    Repository(tmp_path).init()
    first = _commit_file(tmp_path, "a.txt", "alpha", "first")
    BranchManager(tmp_path).create_and_checkout("feature")
    second = _commit_file(tmp_path, "b.txt", "beta", "second")
    return tmp_path, first, second


def test_branch_exists(history):
    root, _, _ = history
    merger = Merger(root)
    assert merger.branch_exists("feature") is True
    assert merger.branch_exists("ghost") is False


def test_is_ancestor_follows_parents(history):
    root, first, second = history
    merger = Merger(root)
    assert merger.is_ancestor(second.hash, first.hash) is True
    assert merger.is_ancestor(first.hash, second.hash) is False


def test_is_ancestor_of_itself(history):
    root, first, _ = history
    assert Merger(root).is_ancestor(first.hash, first.hash) is True


def test_is_ancestor_unknown_hashes(history):
    root, first, _ = history
    merger = Merger(root)
    assert merger.is_ancestor("", first.hash) is False
    assert merger.is_ancestor(first.hash, "") is False


def test_merge_moves_other_branch_forward(history):
    root, first, second = history
    assert _tip(root, "main") == first.hash
    assert Merger(root).merge("main") == "feature"
    assert _tip(root, "main") == second.hash
    assert _tip(root, "feature") == second.hash


def test_merge_diverged_raises(history):
    root, first, _ = history
    BranchManager(root).checkout("main")
    with pytest.raises(MinigitError, match="No matching commits found"):
        Merger(root).merge("feature")
    assert _tip(root, "feature") != first.hash
    assert _tip(root, "main") == first.hash


def test_merge_missing_branch_raises(history):
    root, _, _ = history
    with pytest.raises(MinigitError, match="doesn't exist"):
        Merger(root).merge("ghost")


def test_pull_moves_current_branch_forward(history):
    root, first, second = history
    BranchManager(root).checkout("main")
    assert Merger(root).pull("feature") == "main"
    assert _tip(root, "main") == second.hash
    assert CommitStore(root).head_commit() == second


def test_pull_behind_branch_raises(history):
    root, _, second = history
    with pytest.raises(MinigitError, match="No matching commits found"):
        Merger(root).pull("main")
    assert _tip(root, "feature") == second.hash


def test_pull_missing_branch_raises(history):
    root, _, _ = history
    with pytest.raises(MinigitError):
        Merger(root).pull("ghost")