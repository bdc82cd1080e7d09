import json

import pytest

from apidoc.cli.main import build_parser, load_object, main
from apidoc.tests.harness.sample_app import app


def test_load_object_resolves_module_attribute():
    assert load_object("apidoc.tests.harness.sample_app:app") is app

    with pytest.raises(ValueError):
        load_object("apidoc.tests.harness.sample_app")


def test_flags_default_to_settings():
    args = build_parser().parse_args(["m:app", "--bootstrap", "m:boot"])

    assert args.verbose is None
    assert args.use_transactions is None


def test_main_writes_examples_as_json(tmp_path, monkeypatch):
    monkeypatch.delenv("APIDOC_VERBOSE", raising=False)
    output = tmp_path / "examples.json"
    database = tmp_path / "samples.db"

    code = main([
        "apidoc.tests.harness.sample_app:app",
        "--bootstrap", "apidoc.tests.harness.sample_app:register_samples",
        "--database-url", f"sqlite:///{database}",
        "--output", str(output),
    ])

    assert code == 0
    examples = json.loads(output.read_text(encoding="utf-8"))
    assert examples["[POST] /users"][0]["status"] == 201
    assert "[GET] /health" not in examples
