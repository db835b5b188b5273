"""
Pytest configuration file.
Fixtures build a throwaway site: a bare remote and a `public/` working copy pushed to its main branch.
"""
import pytest
from git import Repo

from helpers import configure_identity


@pytest.fixture
def remote_repo(tmp_path):
    return Repo.init(tmp_path / "remote.git", bare=True)


@pytest.fixture
def site(tmp_path, remote_repo):
    """Site root whose `public/` directory tracks `remote_repo` on branch main."""
    root = tmp_path / "site"
    public = root / "public"
    public.mkdir(parents=True)

    repo = Repo.init(public)
    configure_identity(repo)
    repo.git.symbolic_ref("HEAD", "refs/heads/main")
    repo.create_remote("origin", remote_repo.git_dir)

    (public / "index.html").write_text("initial")
    (public / "old.html").write_text("stale page")
    repo.git.add(all=True)
    repo.git.commit(m="initial")
    repo.git.push("origin", "main")
    return root


@pytest.fixture
def public_repo(site):
    return Repo(site / "public")
