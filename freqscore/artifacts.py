"""
write word maps to disk as static lookup tables.

generates, per locale:
- {output}/{lang}/wordmap.json: metadata + words/scores arrays
- {output}/{lang}/autogen.py: python module with a MAP dict literal

both list pairs in ascending score order (WordMap.sorted_pairs).
"""

import json
from dataclasses import replace
from pathlib import Path
from typing import Any

from .config import Config, DEFAULT_CONFIG, ScoreFormula
from .errors import ArtifactError
from .wordmap import WordMap


def locale_from_path(path: Path | str) -> str:
    """
    derive the locale from a frequency list's location.

    lists are laid out as .../{lang}/{lang}_full.txt, so the locale is
    the name of the containing directory.
    """
    lang = Path(path).parent.name
    if not lang:
        raise ValueError(f"can't derive a locale from {path}: no parent directory")
    return check_locale(lang)


def check_locale(lang: str) -> str:
    """return lang if it can name a locale directory and namespace."""
    if not lang.isidentifier():
        raise ValueError(f"{lang!r} is not a valid locale name")
    return lang


def word_map_payload(word_map: WordMap, lang: str, config: Config = DEFAULT_CONFIG) -> dict[str, Any]:
    pairs = word_map.sorted_pairs()
    return {
        "schema_version": config.schema_version,
        "lang": lang,
        "formula": word_map.formula.value,
        "max_count": word_map.max_count,
        "words": [p.word for p in pairs],
        "scores": [p.score for p in pairs],
    }


def word_map_to_source(word_map: WordMap, lang: str) -> str:
    """render a word map as a python module defining MAP."""
    lines = [
        f'"""word scores for locale {lang!r}. generated by scripts/gen_maps.py, do not edit."""',
        "",
        f"LANG = {lang!r}",
        f"FORMULA = {word_map.formula.value!r}",
        f"MAX_COUNT = {word_map.max_count!r}",
        "",
        "MAP = {",
    ]
    for p in word_map.sorted_pairs():
        lines.append(f"    {p.word!r}: {p.score!r},")
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_word_map(
    word_map: WordMap,
    lang: str,
    config: Config = DEFAULT_CONFIG,
    output_dir: Path | None = None,
) -> dict[str, Path]:
    """
    write the json and python artifacts for one locale.

    args:
        word_map: the map to serialize
        lang: locale name, also the subdirectory name
        config: pipeline config (file names, schema version)
        output_dir: override output root (default: config.output_dir)

    returns:
        dict mapping artifact name to file path
    """
    check_locale(lang)
    if output_dir is not None:
        config = replace(config, output_dir=output_dir)
    config.map_path(lang).parent.mkdir(parents=True, exist_ok=True)

    paths: dict[str, Path] = {}

    # --- wordmap.json ---
    map_path = config.map_path(lang)
    with open(map_path, "w", encoding="utf-8") as f:
        json.dump(word_map_payload(word_map, lang, config), f, ensure_ascii=False)
    paths["map"] = map_path

    # --- autogen.py ---
    source_path = config.source_path(lang)
    with open(source_path, "w", encoding="utf-8") as f:
        f.write(word_map_to_source(word_map, lang))
    paths["source"] = source_path

    return paths


def read_word_map(path: Path | str) -> WordMap:
    """load a wordmap.json written by write_word_map."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ArtifactError(f"{path}: not valid json: {e}") from e

    if not isinstance(data, dict):
        raise ArtifactError(f"{path}: expected a json object")

    missing = [k for k in ("words", "scores", "formula", "max_count") if k not in data]
    if missing:
        raise ArtifactError(f"{path}: missing {', '.join(missing)}")

    words = data["words"]
    scores = data["scores"]
    if len(words) != len(scores):
        raise ArtifactError(f"{path}: {len(words)} words but {len(scores)} scores")

    try:
        formula = ScoreFormula(data["formula"])
    except ValueError as e:
        raise ArtifactError(f"{path}: {e}") from e

    return WordMap(dict(zip(words, scores)), formula=formula, max_count=data["max_count"])
