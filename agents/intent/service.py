# agents/intent/service.py
"""
Intent service - keyword/phrase scoring over normalized Hinglish, Devanagari and English input
"""
import re
import unicodedata
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from agents.intent.models import Intent, IntentEntities, IntentResult
from agents.intent.patterns import (
    CROP_SYNONYMS, HELPER_WORDS, INTENT_PATTERNS, NAVIGATION_TARGETS, STAGE_SYNONYMS,
    STOPWORDS, VOICE_COMMAND_SUGGESTIONS
)

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"\d+(?:\.\d+)?")

def normalize(text: str) -> str:
    """Lowercase, drop punctuation and symbols, collapse whitespace.

    Works on Unicode categories rather than ``\\w`` so Devanagari vowel
    signs (category Mc/Mn) survive.
    """
    text = unicodedata.normalize("NFC", text or "").lower()
    cleaned = "".join(" " if unicodedata.category(ch)[0] in "PS" else ch for ch in text)
    return " ".join(cleaned.split())

class _Phrase:
    __slots__ = ("intent", "text", "tokens", "content", "helper_only")

    def __init__(self, intent: Intent, raw: str):
        self.intent = intent
        self.text = normalize(raw)
        self.tokens = tuple(self.text.split())
        self.content = frozenset(t for t in self.tokens if t not in STOPWORDS) or frozenset(self.tokens)
        self.helper_only = all(t in HELPER_WORDS for t in self.tokens)

def _compile_phrases() -> Tuple[_Phrase, ...]:
    return tuple(
        _Phrase(intent, raw)
        for intent, phrases in INTENT_PATTERNS.items()
        for raw in phrases
    )

def _compile_synonyms(table: Dict[str, Tuple[str, ...]]) -> Tuple[Tuple[str, frozenset], ...]:
    return tuple(
        (name, frozenset(normalize(word) for word in words))
        for name, words in table.items()
    )

class IntentService:
    """Stateless classifier; the same input always yields the same IntentResult"""

    _PHRASES = _compile_phrases()
    _CROPS = _compile_synonyms(CROP_SYNONYMS)
    _STAGES = _compile_synonyms(STAGE_SYNONYMS)

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.confidence_floor = float(config.get("confidence_floor", 0.3))
        self.exact_match_score = float(config.get("exact_match_score", 1.0))
        self.containment_score = float(config.get("containment_score", 0.8))
        self.overlap_weight = float(config.get("overlap_weight", 0.6))

    def classify(self, text: str) -> IntentResult:
        normalized = normalize(text)
        tokens = normalized.split()

        best: Optional[_Phrase] = None
        best_key = (0.0, 0)
        if tokens:
            for phrase in self._PHRASES:
                key = (self._score(normalized, tokens, phrase), len(phrase.text))
                if key > best_key:
                    best, best_key = phrase, key

        entities = self.extract_entities(text)

        if best is None or best_key[0] <= self.confidence_floor:
            logger.debug(f"No intent above floor for input: {normalized!r}")
            return IntentResult(
                intent=Intent.UNKNOWN,
                confidence=0.0,
                entities=entities,
                raw_input=text
            )

        return IntentResult(
            intent=best.intent,
            confidence=round(best_key[0], 2),
            entities=entities,
            raw_input=text,
            navigation_target=NAVIGATION_TARGETS.get(best.intent)
        )

    def _score(self, normalized: str, tokens: List[str], phrase: _Phrase) -> float:
        if normalized == phrase.text:
            return self.exact_match_score
        if phrase.helper_only:
            bare = all(t in HELPER_WORDS or t in STOPWORDS for t in tokens)
            return self.containment_score if bare else 0.0

        padded_text = f" {normalized} "
        padded_phrase = f" {phrase.text} "
        if padded_phrase in padded_text:
            return self.containment_score
        if padded_text in padded_phrase and any(t not in STOPWORDS for t in tokens):
            return self.containment_score

        overlap = len(phrase.content.intersection(tokens))
        return self.overlap_weight * overlap / len(phrase.content)

    def extract_entities(self, text: str) -> IntentEntities:
        tokens = set(normalize(text).split())

        crop = next((name for name, words in self._CROPS if tokens & words), None)
        stage = next((name for name, words in self._STAGES if tokens & words), None)

        value: Optional[Union[int, float]] = None
        match = _NUMBER.search(text or "")
        if match:
            raw = match.group(0)
            value = float(raw) if "." in raw else int(raw)

        return IntentEntities(crop=crop, stage=stage, value=value)

    @staticmethod
    def suggest_commands() -> List[str]:
        """Example utterances for the voice UI"""
        return list(VOICE_COMMAND_SUGGESTIONS)
