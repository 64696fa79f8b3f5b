import shutil
import subprocess
from pathlib import Path

import pytest

CARGO_TOML = """\
[package]
name = "demo"
version = "0.3.1"
authors = ["Jane O'Hara <jane@example.com>"]

[profile.release.target]
lto = true
debug = 1
opt-level = 3.0

[dependencies]
serde = "1.0"
toml = { version = "0.5", features = ["preserve_order"] }
"""


@pytest.fixture
def profile_document():
    return {"profile": {"target": {"lto": True, "debug": 1}}}


@pytest.fixture
def cargo_toml(tmp_path: Path) -> Path:
    path = tmp_path / "Cargo.toml"
    path.write_text(CARGO_TOML)
    return path


@pytest.fixture
def ensure_bash():
    if shutil.which("bash") is None:
        pytest.skip("bash not installed")


@pytest.fixture
def bash_words(ensure_bash):
    """
    Let bash parse `text` as the words of an array and return them.
    """

    def split(text: str) -> list[str]:
        result = subprocess.run(
            ["bash", "-c", f"words=({text}); printf '%s\\0' \"${{words[@]}}\""],
            check=True,
            capture_output=True,
        )
        return result.stdout.decode().split("\0")[:-1]

    return split
