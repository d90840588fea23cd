from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence

import yaml

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PATH = Path(__file__).resolve().parent.parent / "data" / "words.yaml"


class WordCorpus:
    """Immutable list of words that random lines are drawn from.

    Each corpus owns its own ``random.Random`` so a seed gives repeatable
    lines without touching the module-level generator.
    """

    def __init__(self, words: Sequence[str], seed: Optional[int] = None) -> None:
        self._words = tuple(words)
        self._rng = random.Random(seed)

    def __len__(self) -> int:
        return len(self._words)

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def choice(self) -> str:
        """Return one word picked uniformly at random."""
        if not self._words:
            raise ValueError("Word corpus is empty")
        return self._words[self._rng.randrange(len(self._words))]

    def sample_line(self, length: int) -> List[str]:
        return [self.choice() for _ in range(length)]

    @classmethod
    def load(cls, path: Optional[Path] = None, seed: Optional[int] = None) -> "WordCorpus":
        words_path = path or DEFAULT_WORDS_PATH
        if not words_path.exists():
            raise FileNotFoundError(f"Word list not found: {words_path}")

        raw = yaml.safe_load(words_path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{words_path.name}: expected YAML with a 'words' list")
        content = raw.get("words")
        if content is None:
            raise ValueError(f"{words_path.name}: missing 'words'")
        if not isinstance(content, list):
            raise ValueError(f"{words_path.name}: 'words' must be a list")
        words = [str(item).strip() for item in content if str(item).strip()]
        if not words:
            raise ValueError(f"{words_path.name}: 'words' has no entries")

        logger.info("Loaded %d words from %s", len(words), words_path)
        return cls(words, seed=seed)