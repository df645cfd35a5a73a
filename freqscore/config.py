"""
configuration for the freqscore pipeline.

picks which of the scoring variants to run: how a count becomes a word
score, how per-word scores become a text score, and how strict the
frequency-list parser is.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ScoreFormula(str, Enum):
    """how a raw count turns into a difficulty score."""

    # 1 / count, floats in (0, 1]
    RECIPROCAL_FLOAT = "reciprocal_float"

    # floor(UINT32_MAX / count), ints in [1, UINT32_MAX]
    RECIPROCAL_SCALED_INT = "reciprocal_scaled_int"

    # the count itself
    RAW_COUNT = "raw_count"


class Aggregator(str, Enum):
    """how the per-word scores of a text collapse into one number."""

    KURTOSIS = "kurtosis"
    AVERAGE = "average"


@dataclass
class Config:
    """pipeline configuration, tweak these as needed."""

    formula: ScoreFormula = ScoreFormula.RECIPROCAL_FLOAT
    aggregator: Aggregator = Aggregator.KURTOSIS

    # skip list entries whose word has a space, digit, hyphen or period
    filter_keys: bool = True

    # drop the last line of a list when it has no terminating newline
    drop_partial_line: bool = False

    # emit the last word of a text even when nothing follows it
    flush_trailing: bool = True

    # passed to bytes.decode when reading lists and texts
    encoding_errors: str = "strict"

    # schema version for wordmap.json (bump if format changes)
    schema_version: int = 1

    # generated artifacts land in {output_dir}/{lang}/
    output_dir: Path = Path("lang")
    map_file: str = "wordmap.json"
    source_file: str = "autogen.py"

    def __post_init__(self):
        """accept plain strings for the enum fields and paths."""
        self.formula = ScoreFormula(self.formula)
        self.aggregator = Aggregator(self.aggregator)
        self.output_dir = Path(self.output_dir)

    def map_path(self, lang: str) -> Path:
        return self.output_dir / lang / self.map_file

    def source_path(self, lang: str) -> Path:
        return self.output_dir / lang / self.source_file


# default config instance
DEFAULT_CONFIG = Config()

# the three historical variants of the tool
PRESETS: dict[str, Config] = {
    # float reciprocal, filtered keys, sorted export
    "float": Config(),
    # reciprocal scaled to uint32, every key accepted
    "scaled": Config(
        formula=ScoreFormula.RECIPROCAL_SCALED_INT,
        filter_keys=False,
    ),
    # raw counts averaged over the text
    "average": Config(
        formula=ScoreFormula.RAW_COUNT,
        aggregator=Aggregator.AVERAGE,
        filter_keys=False,
    ),
}
