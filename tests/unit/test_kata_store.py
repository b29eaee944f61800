"""
Unit tests for the YAML kata store.

Tests:
- Loading and validating the kata file
- init writes the packaged defaults once
- mark_done appends today's date and rejects duplicates and unknown names
"""

from datetime import date

import pytest
import yaml

from katas.core.models import Kata
from katas.store.kata_store import (
    AlreadyDoneError,
    ConfigExistsError,
    KataNotFoundError,
    KataStore,
    KataStoreError,
    default_katas_yaml,
)


@pytest.fixture
def store(kata_file):
    return KataStore(kata_file)


class TestLoad:
    def test_loads_katas(self, store):
        katas = store.load()

        assert [k.name for k in katas] == ["fizzbuzz", "bowling"]
        assert katas[0].done == [date(2024, 6, 1), date(2024, 6, 10)]
        assert katas[1].done == []

    def test_unquoted_dates(self, tmp_path):
        path = tmp_path / "katas.yaml"
        path.write_text("- name: a\n  url: u\n  done: [2024-06-01]\n", encoding="utf-8")

        assert KataStore(path).load()[0].done == [date(2024, 6, 1)]

    def test_empty_file_is_empty_list(self, tmp_path):
        path = tmp_path / "katas.yaml"
        path.write_text("", encoding="utf-8")

        assert KataStore(path).load() == []

    def test_numeric_name_read_as_text(self, tmp_path):
        path = tmp_path / "katas.yaml"
        path.write_text("- name: 2048\n  url: u\n", encoding="utf-8")

        kata = KataStore(path).load()[0]

        assert kata.name == "2048"

    def test_blank_url_and_done(self, tmp_path):
        path = tmp_path / "katas.yaml"
        path.write_text("- name: bowling\n  url:\n  done:\n", encoding="utf-8")

        kata = KataStore(path).load()[0]

        assert kata.url == ""
        assert kata.done == []
        assert kata.times_done == 0

    def test_numeric_name_can_be_marked_done(self, tmp_path):
        path = tmp_path / "katas.yaml"
        path.write_text("- name: 2048\n  url: u\n", encoding="utf-8")
        store = KataStore(path)

        store.mark_done("2048", date(2024, 6, 15))

        assert store.load()[0].done == [date(2024, 6, 15)]

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "katas.yaml"
        path.write_bytes(b"- name: caf\xe9\n  url: u\n")

        with pytest.raises(KataStoreError, match="reading config file"):
            KataStore(path).load()

    def test_missing_file(self, tmp_path):
        with pytest.raises(KataStoreError, match="reading config file"):
            KataStore(tmp_path / "missing.yaml").load()

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "katas.yaml"
        path.write_text("- name: [unclosed\n", encoding="utf-8")

        with pytest.raises(KataStoreError, match="parsing config file"):
            KataStore(path).load()

    def test_invalid_schema(self, tmp_path):
        path = tmp_path / "katas.yaml"
        path.write_text("- url: no-name\n", encoding="utf-8")

        with pytest.raises(KataStoreError, match="parsing config file"):
            KataStore(path).load()


class TestSave:
    def test_round_trip_keeps_layout(self, tmp_path):
        path = tmp_path / "nested" / "katas.yaml"
        store = KataStore(path)

        store.save([Kata(name="a", url="u", done=[date(2024, 6, 1)]), Kata(name="b", url="v")])

        assert yaml.safe_load(path.read_text(encoding="utf-8")) == [
            {"name": "a", "url": "u", "done": ["2024-06-01"]},
            {"name": "b", "url": "v"},
        ]


class TestInitConfig:
    def test_writes_defaults(self, tmp_path):
        path = tmp_path / "config" / "katas.yaml"
        store = KataStore(path)

        store.init_config()

        assert path.read_text(encoding="utf-8") == default_katas_yaml()
        katas = store.load()
        assert katas
        assert all(k.times_done == 0 for k in katas)

    def test_refuses_to_overwrite(self, store, kata_file):
        before = kata_file.read_text(encoding="utf-8")

        with pytest.raises(ConfigExistsError, match="already exists"):
            store.init_config()

        assert kata_file.read_text(encoding="utf-8") == before


class TestMarkDone:
    def test_appends_today(self, store):
        kata = store.mark_done("bowling", date(2024, 6, 15))

        assert kata.done == [date(2024, 6, 15)]
        assert store.load()[1].done == [date(2024, 6, 15)]

    def test_appends_after_existing_dates(self, store):
        store.mark_done("fizzbuzz", date(2024, 6, 15))

        assert store.load()[0].done[-1] == date(2024, 6, 15)
        assert store.load()[0].times_done == 3

    def test_already_done_today(self, store, kata_file):
        before = kata_file.read_text(encoding="utf-8")

        with pytest.raises(AlreadyDoneError, match="already marked as done today"):
            store.mark_done("fizzbuzz", date(2024, 6, 10))

        assert kata_file.read_text(encoding="utf-8") == before

    def test_unknown_kata(self, store):
        with pytest.raises(KataNotFoundError, match="kata roman not found"):
            store.mark_done("roman", date(2024, 6, 15))

    def test_name_match_is_exact(self, store):
        with pytest.raises(KataNotFoundError):
            store.mark_done("FizzBuzz", date(2024, 6, 15))
