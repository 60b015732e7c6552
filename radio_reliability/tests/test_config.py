"""
Tests for settings loading and the message catalogue.
"""

import json

import pytest

from radio_reliability.config import SETTINGS_FILENAME, SchemeSettings, load_settings
from radio_reliability.i18n import Messages


class TestLoadSettings:

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "nope.json")
        assert settings == SchemeSettings()
        assert settings.bucket_count == 10
        assert settings.language == "ru"
        assert settings.strict_kinds is False

    def test_values_read(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_text(
            json.dumps({"scheme_name": "PSU", "bucket_count": 7, "precision": 3, "log_level": "debug"}),
            encoding="utf-8",
        )
        settings = load_settings(path)
        assert settings.scheme_name == "PSU"
        assert settings.bucket_count == 7
        assert settings.precision == 3
        assert settings.log_level == "DEBUG"

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_text(json.dumps({"colour": "blue", "language": "en"}), encoding="utf-8")
        assert load_settings(path).language == "en"

    def test_invalid_json_gives_defaults(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_settings(path) == SchemeSettings()

    def test_non_object_gives_defaults(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_settings(path) == SchemeSettings()

    def test_default_path_is_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / SETTINGS_FILENAME).write_text(json.dumps({"bucket_count": 3}), encoding="utf-8")
        assert load_settings().bucket_count == 3

    def test_strict_kinds_requires_boolean(self, tmp_path):
        """A quoted "false" must not switch strict mode on."""
        path = tmp_path / "s.json"
        path.write_text(json.dumps({"strict_kinds": "false"}), encoding="utf-8")
        assert load_settings(path).strict_kinds is False

    @pytest.mark.parametrize("value", ["true", 1, "yes", None])
    def test_strict_kinds_non_boolean_uses_default(self, value):
        assert SchemeSettings.from_dict({"strict_kinds": value}).strict_kinds is False

    def test_strict_kinds_true(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_text(json.dumps({"strict_kinds": True}), encoding="utf-8")
        assert load_settings(path).strict_kinds is True

    def test_bad_number_gives_defaults(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_text(json.dumps({"bucket_count": "ten"}), encoding="utf-8")
        assert load_settings(path) == SchemeSettings()

    def test_round_trip_dict(self):
        settings = SchemeSettings(scheme_name="X", strict_kinds=True)
        assert SchemeSettings.from_dict(settings.to_dict()) == settings


class TestMessages:

    def test_russian_default(self):
        m = Messages()
        assert m.get("error.invalid_choice") == "Некорректный выбор!"
        assert m.kind_label("inductor") == "Катушка"

    def test_english(self):
        m = Messages("en")
        assert m.get("display.scheme", name="A") == "Scheme: A"

    def test_unsupported_language_falls_back(self):
        assert Messages("xx").language == "ru"

    def test_missing_key(self):
        assert Messages().get("no.such.key") == "[no.such.key]"

    def test_catalogues_have_same_keys(self):
        ru, en = Messages("ru"), Messages("en")
        assert set(ru._texts) == set(en._texts)
