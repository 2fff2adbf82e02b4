import textwrap

import pytest

from localization_manager.core.extractor import LocalizationExtractor
from localization_manager.core.options import ExtractionOptions
from localization_manager.core.source_unit import SourceUnit


@pytest.fixture
def make_unit():
    """Build a SourceUnit from an indented snippet."""
    def _make_unit(text, file_name="test.ts"):
        return SourceUnit.from_text(file_name, textwrap.dedent(text))
    return _make_unit


@pytest.fixture
def extract_snippet(make_unit):
    """Extract the catalog fragment of a snippet, returning (catalog, errors)."""
    def _extract(text, exclude=None, file_name="test.ts"):
        options = ExtractionOptions(root=".", output="nls.json", exclude=exclude)
        errors = []
        localization = LocalizationExtractor(options).extract_from_unit(make_unit(text, file_name), errors)
        return localization, errors
    return _extract


@pytest.fixture
def write_source(tmp_path):
    """Write a source file below tmp_path and return its path."""
    def _write(relative_path, text):
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path
    return _write
