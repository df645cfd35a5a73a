import json

import pytest

from freqscore.artifacts import (
    check_locale,
    locale_from_path,
    read_word_map,
    word_map_to_source,
    write_word_map,
)
from freqscore.config import Config, PRESETS
from freqscore.errors import ArtifactError, FreqScoreError
from freqscore.wordmap import build_from_text

FREQLIST = "you 2878\ni 2708\nthe 2276\nrhinoceros 3\ncafé 12\n"


def test_locale_from_path():
    assert locale_from_path("/home/me/FrequencyWords/content/2018/en/en_full.txt") == "en"
    assert locale_from_path("lists/pt_br/pt_br_50k.txt") == "pt_br"


def test_locale_from_path_rejects_bad_locations():
    with pytest.raises(ValueError):
        locale_from_path("en_full.txt")
    with pytest.raises(ValueError):
        locale_from_path("content/2018/en-GB/list.txt")


def test_write_and_read_round_trip(tmp_path):
    word_map = build_from_text(FREQLIST)
    paths = write_word_map(word_map, "en", Config(output_dir=tmp_path))

    assert paths["map"] == tmp_path / "en" / "wordmap.json"
    assert paths["source"] == tmp_path / "en" / "autogen.py"

    loaded = read_word_map(paths["map"])
    assert loaded.sorted_pairs() == word_map.sorted_pairs()
    assert list(loaded) == [p.word for p in word_map.sorted_pairs()]
    assert loaded.formula == word_map.formula
    assert loaded.max_count == 2878


def test_json_payload_is_sorted_ascending(tmp_path):
    word_map = build_from_text(FREQLIST)
    paths = write_word_map(word_map, "en", output_dir=tmp_path)

    data = json.loads(paths["map"].read_text(encoding="utf-8"))
    assert data["lang"] == "en"
    assert data["formula"] == "reciprocal_float"
    assert data["words"][0] == "you"
    assert data["words"][-1] == "rhinoceros"
    assert data["scores"] == sorted(data["scores"])


def test_integer_scores_round_trip(tmp_path):
    word_map = build_from_text(FREQLIST, PRESETS["scaled"])
    paths = write_word_map(word_map, "en", output_dir=tmp_path)

    loaded = read_word_map(paths["map"])
    assert dict(loaded) == dict(word_map)
    assert all(isinstance(s, int) for s in loaded.values())


def test_generated_source_defines_map():
    word_map = build_from_text(FREQLIST)
    source = word_map_to_source(word_map, "en")

    namespace: dict = {}
    exec(compile(source, "autogen.py", "exec"), namespace)

    assert namespace["LANG"] == "en"
    assert namespace["FORMULA"] == "reciprocal_float"
    assert namespace["MAP"] == dict(word_map)
    assert list(namespace["MAP"]) == [p.word for p in word_map.sorted_pairs()]


@pytest.mark.parametrize("lang", ["en-GB", "../x", "", "en/us"])
def test_write_rejects_bad_locale(tmp_path, lang):
    word_map = build_from_text(FREQLIST)
    with pytest.raises(ValueError):
        write_word_map(word_map, lang, output_dir=tmp_path / "lang")
    assert not (tmp_path / "x").exists()


def test_check_locale():
    assert check_locale("pt_br") == "pt_br"
    with pytest.raises(ValueError):
        check_locale("en-GB")


@pytest.mark.parametrize(
    "payload",
    [
        {"words": ["a"], "scores": [1.0], "formula": "reciprocal_float"},
        {"words": ["a", "b"], "scores": [1.0], "formula": "reciprocal_float", "max_count": 1},
        {"words": ["a"], "scores": [1.0], "formula": "log_count", "max_count": 1},
        ["a", 1.0],
    ],
)
def test_read_rejects_broken_artifacts(tmp_path, payload):
    path = tmp_path / "wordmap.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(ArtifactError):
        read_word_map(path)


def test_read_rejects_invalid_json(tmp_path):
    path = tmp_path / "wordmap.json"
    path.write_text("{not json", encoding="utf-8")

    # callers catching the package's base error see it too
    with pytest.raises(FreqScoreError):
        read_word_map(path)
