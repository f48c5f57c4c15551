"""keyward — extract and replace large keyword vocabularies in linear time."""

from keyward.processor.models import Match, TokenizationPolicy
from keyward.processor.processor import KeywordProcessor

__version__ = "0.1.0"

__all__ = ["KeywordProcessor", "Match", "TokenizationPolicy", "__version__"]
