"""Character-level sliding-window language model.

Train on a corpus, then continue a seed text by weighted character sampling.
"""

from .config import ModelConfig, NormalizeConfig
from .corpus import iter_corpus, read_corpus
from .frequency import CharEntry, FrequencyTable
from .language_model import LanguageModel

__version__ = "1.0.0"

__all__ = [
    "CharEntry",
    "FrequencyTable",
    "LanguageModel",
    "ModelConfig",
    "NormalizeConfig",
    "iter_corpus",
    "read_corpus",
]
