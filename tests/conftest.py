"""Shared test fixtures and configuration."""

import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Optional

import pytest

from ollacommit.config import ENV_OVERRIDES
from ollacommit.global_config import HookSettings
from ollacommit.llm import BaseLLMProvider


ORIGINAL_MESSAGE = "\n# Please enter the commit message for your changes.\n"


class FakeProvider(BaseLLMProvider):
    """Provider returning a canned answer and recording each call."""

    def __init__(self, response: Optional[str] = None, error: Optional[Exception] = None):
        self.model = "fake-model"
        self.response = response
        self.error = error
        self.calls = []

    def generate(self, prompt: str, timeout: float) -> Optional[str]:
        self.calls.append({"prompt": prompt, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def message_file(temp_dir):
    """A commit message file as git prepares it for a plain commit."""
    path = temp_dir / "COMMIT_EDITMSG"
    path.write_bytes(ORIGINAL_MESSAGE.encode("utf-8"))
    return path


@pytest.fixture
def settings():
    """Default hook settings."""
    return HookSettings()


@pytest.fixture
def sample_diff():
    """Sample staged diff."""
    return """diff --git a/hello.py b/hello.py
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ b/hello.py
@@ -0,0 +1 @@
+print('hello')"""


@pytest.fixture
def config_dir(mocker, monkeypatch, temp_dir):
    """Point ~/.ollacommit at a temporary directory and clear overrides."""
    mock_dir = temp_dir / ".ollacommit"
    mocker.patch("ollacommit.global_config._CONFIG_DIR", mock_dir)
    mocker.patch("ollacommit.global_config.load_dotenv")
    for env_var in ENV_OVERRIDES.values():
        monkeypatch.delenv(env_var, raising=False)
    return mock_dir


def git(repo: Path, *args: str) -> None:
    """Run a git command inside repo, failing the test on error."""
    subprocess.run(["git", *args], cwd=repo, check=True, capture_output=True)


@pytest.fixture
def git_repo(monkeypatch, temp_dir):
    """An empty git repository, made the current directory."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = temp_dir / "repo"
    repo.mkdir()
    for var in ("GIT_DIR", "GIT_INDEX_FILE", "GIT_WORK_TREE"):
        monkeypatch.delenv(var, raising=False)
    git(repo, "init", "-q")
    git(repo, "config", "user.name", "Test User")
    git(repo, "config", "user.email", "test@example.com")
    monkeypatch.chdir(repo)
    return repo
