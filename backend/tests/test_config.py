from __future__ import annotations

import json

from models.config import TextSettings
from models.diff import DiffMode
from services.config_manager import ConfigManager


def test_defaults_without_config_file(config_dir):
    config = ConfigManager.get_instance().get_config()

    assert config["text"]["defaultDiffMode"] == "line"
    assert config["text"]["maxLoremParagraphs"] == 10
    assert config["cors"]["allowOrigins"] == ["*"]


def test_instance_is_a_singleton(config_dir):
    assert ConfigManager.get_instance() is ConfigManager.get_instance()


def test_config_file_lives_in_configured_dir(config_dir):
    assert ConfigManager.get_instance().config_file == config_dir / "config.json"


def test_stored_values_layer_over_defaults(config_dir):
    (config_dir / "config.json").write_text(json.dumps({"text": {"defaultDiffMode": "word"}}))

    config = ConfigManager.get_instance().get_config()

    assert config["text"]["defaultDiffMode"] == "word"
    assert config["text"]["defaultRegexFlags"] == "g"


def test_corrupt_file_falls_back_to_defaults(config_dir):
    (config_dir / "config.json").write_text("{not json")

    config = ConfigManager.get_instance().get_config()

    assert config["text"]["defaultDiffMode"] == "line"


def test_save_config_persists_to_disk(config_dir):
    ConfigManager.get_instance().save_config({"server": {"port": 8080}})

    stored = json.loads((config_dir / "config.json").read_text())
    assert stored["server"] == {"port": 8080}


def test_get_config_returns_a_copy(config_dir):
    manager = ConfigManager.get_instance()
    manager.get_config()["text"]["defaultDiffMode"] = "char"

    assert manager.get_text_settings().default_diff_mode == DiffMode.LINE


# ---- HTTP ----


def test_get_config_endpoint(client):
    r = client.get("/api/config")

    assert r.status_code == 200
    assert set(r.json()) == {"server", "cors", "text"}


def test_update_config_merges_section(client, config_dir):
    r = client.put("/api/config", json={"text": {"defaultDiffMode": "word"}})

    assert r.status_code == 200
    assert r.json() == {"status": "success", "message": "Configuration updated"}

    text = client.get("/api/config").json()["text"]
    assert text["defaultDiffMode"] == "word"
    assert text["maxLoremParagraphs"] == 10
    assert (config_dir / "config.json").exists()


def test_update_config_rejects_unknown_diff_mode(client):
    r = client.put("/api/config", json={"text": {"defaultDiffMode": "paragraph"}})

    assert r.status_code == 400
    assert r.json()["error"].startswith("Invalid text setting defaultDiffMode")


def test_update_config_rejects_badly_typed_text_settings(client):
    r = client.put(
        "/api/config", json={"text": {"maxLoremParagraphs": "ten", "defaultRegexFlags": 5}}
    )

    assert r.status_code == 400
    assert r.json()["error"].startswith("Invalid text setting")

    # nothing was saved, so the text endpoints keep working
    assert client.get("/api/text/lorem-ipsum").status_code == 200
    assert client.post("/api/text/regex", json={"text": "a", "pattern": "a"}).status_code == 200


def test_update_config_rejects_unknown_regex_flags(client):
    r = client.put("/api/config", json={"text": {"defaultRegexFlags": "gq"}})

    assert r.status_code == 400
    assert "defaultRegexFlags" in r.json()["error"]


def test_update_config_rejects_non_positive_paragraph_limit(client):
    r = client.put("/api/config", json={"text": {"maxLoremParagraphs": 0}})

    assert r.status_code == 400


def test_update_config_rejects_unknown_text_keys(client):
    r = client.put("/api/config", json={"text": {"maxParagraphs": 3}})

    assert r.status_code == 400


def test_invalid_stored_text_settings_fall_back_to_defaults(config_dir):
    (config_dir / "config.json").write_text(
        json.dumps({"text": {"maxLoremParagraphs": "ten", "defaultRegexFlags": 5}})
    )

    assert ConfigManager.get_instance().get_text_settings() == TextSettings()


def test_text_endpoints_survive_hand_edited_config(client, config_dir):
    (config_dir / "config.json").write_text(json.dumps({"text": {"maxLoremParagraphs": "ten"}}))

    r = client.get("/api/text/lorem-ipsum", params={"count": 3})

    assert r.status_code == 200
    assert len(r.json()["result"].split("\n\n")) == 3
