"""
Pytest configuration for tamlang tests.
"""
import sys
import os

import pytest

# Make `import tamlang` work from a plain checkout (src/ on sys.path)
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)


@pytest.fixture
def write_source(tmp_path):
	"""Write a tamlang source file under tmp_path and return its path."""
	def _write(name, text):
		path = tmp_path / name
		path.write_text(text, encoding="utf-8")
		return path
	return _write


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
	for key in ("TAMLANG_DEBUG", "TAMLANG_LOG_LEVEL", "TAMLANG_ENCODING"):
		monkeypatch.delenv(key, raising=False)
