import os
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path):
    """Point CLAUDE_CONFIG_DIR and the home directory at empty temp dirs, drop CCLINE_* settings."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("CCLINE_")}
    env["CLAUDE_CONFIG_DIR"] = str(tmp_path / "claude")
    with patch.dict(os.environ, env, clear=True), \
            patch("pathlib.Path.home", return_value=tmp_path / "home"):
        yield tmp_path / "claude"


@pytest.fixture
def fake_home(isolated_env, tmp_path):
    """Home directory seen by the launcher during the test."""
    return tmp_path / "home"
