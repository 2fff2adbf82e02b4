import json
import os

import pytest

from localization_manager.utils.file_ops import read_json, safe_write, write_json, write_lines


def test_write_json_layout(tmp_path):
    path = tmp_path / "out" / "nls.json"
    write_json(str(path), {"a": {"b": "Zoë"}})
    assert path.read_text(encoding="utf-8") == '{\n    "a": {\n        "b": "Zoë"\n    }\n}\n'


@pytest.mark.parametrize(
    "value, written",
    [
        ("\ud83d", '"\\ud83d"'),
        ("x\udc00y", '"x\\udc00y"'),
        ("🐀", '"🐀"'),
    ],
)
def test_write_json_escapes_unpaired_surrogates(tmp_path, value, written):
    path = tmp_path / "nls.json"
    write_json(str(path), {"key": value}, indent=None)
    assert path.read_text(encoding="utf-8") == '{"key": ' + written + '}\n'
    assert read_json(str(path)) == {"key": value}


def test_read_json_tolerates_byte_order_mark(tmp_path):
    path = tmp_path / "nls.json"
    path.write_bytes(b'\xef\xbb\xbf' + json.dumps({"a": "b"}).encode("utf-8"))
    assert read_json(str(path)) == {"a": "b"}


def test_write_lines_uses_platform_separator(tmp_path):
    path = tmp_path / "errors.log"
    write_lines(str(path), ["one", "two"])
    assert path.read_bytes() == f"one{os.linesep}two".encode("utf-8")


def test_safe_write_keeps_original_on_failure(tmp_path):
    path = tmp_path / "nls.json"
    path.write_text("old", encoding="utf-8")
    with pytest.raises(RuntimeError):
        with safe_write(str(path)) as f:
            f.write("new")
            raise RuntimeError("boom")
    assert path.read_text(encoding="utf-8") == "old"
    assert os.listdir(tmp_path) == ["nls.json"]
