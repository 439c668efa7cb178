"""Tests for JSON export."""

import json

from commentpulse.utils.data_prep import export_to_json, prepare_export


def test_export_writes_payload_with_timestamp(tmp_path):
    body = {"message": "ok", "comments": [], "category": "Music", "themes": []}
    out = tmp_path / "result.json"

    export_to_json(prepare_export("vid123", body), str(out))

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["videoId"] == "vid123"
    assert data["category"] == "Music"
    assert data["metadata"]["export_timestamp"] is not None


def test_export_keeps_unicode(tmp_path):
    out = tmp_path / "result.json"

    export_to_json({"comments": [{"text": "très bien 👍"}]}, str(out))

    assert "très bien 👍" in out.read_text(encoding="utf-8")
