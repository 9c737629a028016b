import pytest

from minigit.branch import BranchManager
from minigit.commit import CommitStore
from minigit.errors import MinigitError
from minigit.repository import Repository


@pytest.fixture
def committed(tmp_path):
    repo = Repository(tmp_path)
    repo.init()
    (tmp_path / "a.txt").write_text("alpha")
    repo.add("a.txt")
    record = CommitStore(tmp_path).commit("first")
    return tmp_path, record


def test_exists_for_default_branch(committed):
    root, _ = committed
    manager = BranchManager(root)
    assert manager.exists("main") is True
    assert manager.exists("feature") is False


def test_create_copies_current_commit(committed):
    root, record = committed
    manager = BranchManager(root)
    assert manager.create("feature") == "main"
    assert manager.exists("feature") is True
    assert (root / ".minigit" / "branches" / "feature").read_text() == record.hash


def test_create_does_not_move_head(committed):
    root, _ = committed
    BranchManager(root).create("feature")
    assert (root / ".minigit" / "HEAD").read_text() == "main"


def test_create_existing_raises(committed):
    root, _ = committed
    manager = BranchManager(root)
    manager.create("feature")
    with pytest.raises(MinigitError, match="already exists"):
        manager.create("feature")


def test_create_on_empty_repository_gives_empty_pointer(tmp_path):
    Repository(tmp_path).init()
    BranchManager(tmp_path).create("feature")
    assert (tmp_path / ".minigit" / "branches" / "feature").read_text() == ""


def test_checkout_updates_head(committed):
    root, record = committed
    manager = BranchManager(root)
    manager.create("feature")
    manager.checkout("feature")
    store = CommitStore(root)
    assert store.head_branch_path() == root / ".minigit" / "branches" / "feature"
    assert store.head_commit() == record


def test_checkout_missing_branch_raises(committed):
    root, _ = committed
    with pytest.raises(MinigitError, match="doesn't exist"):
        BranchManager(root).checkout("ghost")
    assert (root / ".minigit" / "HEAD").read_text() == "main"


def test_create_and_checkout(committed):
    root, record = committed
    manager = BranchManager(root)
    assert manager.create_and_checkout("feature") == "main"
    assert (root / ".minigit" / "HEAD").read_text() == "feature"
    assert (root / ".minigit" / "branches" / "feature").read_text() == record.hash


def test_create_and_checkout_existing_keeps_head(committed):
    root, _ = committed
    manager = BranchManager(root)
    manager.create("feature")
    with pytest.raises(MinigitError):
        manager.create_and_checkout("feature")
    assert (root / ".minigit" / "HEAD").read_text() == "main"