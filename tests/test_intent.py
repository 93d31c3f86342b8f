# tests/test_intent.py
import pytest

from agents.intent.agent import IntentAgent
from agents.intent.models import Intent, NavigationTarget
from agents.intent.service import normalize
from core.config import Settings
from core.exceptions import AgentConfigError

@pytest.fixture
def agent(settings):
    return IntentAgent(settings)

def test_paani_dena_hai_kya(agent):
    result = agent.classify("paani dena hai kya")
    assert result.intent == Intent.ASK_IRRIGATION
    assert result.confidence >= 0.6
    assert result.navigation_target == NavigationTarget.IRRIGATION

@pytest.mark.parametrize("text, intent", [
    ("Temperature kya hai?", Intent.ASK_TEMPERATURE),
    ("Namaste", Intent.GREETING),
    ("नमस्ते", Intent.GREETING),
    ("Koi alert hai?", Intent.ASK_ALERTS),
    ("Kitna paani dena hai?", Intent.ASK_WATER_AMOUNT),
    ("Mausam kaisa hai?", Intent.ASK_WEATHER),
    ("Fasal kaisi hai?", Intent.ASK_CROP_HEALTH),
    ("dhanyawad", Intent.THANKS),
    ("open dashboard", Intent.NAV_DASHBOARD),
])
def test_exact_phrases(agent, text, intent):
    result = agent.classify(text)
    assert result.intent == intent
    assert result.confidence == 1.0

def test_longer_phrase_wins_a_tie(agent):
    result = agent.classify("Dhan ke liye fertilizer batao")
    assert result.intent == Intent.ASK_FERTILIZER
    assert result.confidence == 0.8

def test_contained_phrase(agent):
    result = agent.classify("mitti ki nami batao please")
    assert result.intent == Intent.ASK_SOIL_MOISTURE

@pytest.mark.parametrize("text, target", [
    ("alerts dikhao", NavigationTarget.ALERTS),
    ("open dashboard", NavigationTarget.DASHBOARD),
    ("assistant kholo", NavigationTarget.ASSISTANT),
    ("irrigation dikhao", NavigationTarget.IRRIGATION),
    ("Kitna paani dena hai?", NavigationTarget.IRRIGATION),
])
def test_navigation_targets(agent, text, target):
    assert agent.classify(text).navigation_target == target

def test_informational_intents_have_no_target(agent):
    assert agent.classify("Temperature kya hai?").navigation_target is None

@pytest.mark.parametrize("text", ["xyz abc", "", "   ", "?!"])
def test_unmatched_input_is_unknown(agent, text):
    result = agent.classify(text)
    assert result.intent == Intent.UNKNOWN
    assert result.confidence == 0
    assert result.navigation_target is None

def test_entities(agent):
    result = agent.classify("Dhan ke liye fertilizer batao")
    assert result.entities.crop == "rice"
    assert result.entities.stage is None

    result = agent.classify("गेहूं फूल खाद")
    assert result.intent == Intent.ASK_FERTILIZER
    assert result.entities.crop == "wheat"
    assert result.entities.stage == "flowering"

def test_numeric_entity(agent):
    result = agent.classify("20 mm paani")
    assert result.intent == Intent.ASK_WATER_AMOUNT
    assert result.entities.value == 20

    assert agent.classify("2.5 litre").entities.value == 2.5

def test_classification_is_deterministic(agent):
    for text in ["paani dena hai kya", "khad batao", "xyz", "नमस्ते"]:
        assert agent.classify(text) == agent.classify(text)

def test_normalize_keeps_devanagari_signs():
    assert normalize("  मिट्टी   की नमी? ") == "मिट्टी की नमी"
    assert normalize("Paani, DENA!") == "paani dena"

def test_confidence_floor_is_configurable():
    strict = IntentAgent(Settings(_env_file=None, intent_config={"confidence_floor": 0.85}))
    assert strict.classify("paani dena hai kya").intent == Intent.UNKNOWN
    assert strict.classify("namaste").intent == Intent.GREETING

def test_invalid_floor_rejected():
    with pytest.raises(AgentConfigError):
        IntentAgent(Settings(_env_file=None, intent_config={"confidence_floor": 1.5}))

def test_voice_suggestions(agent):
    suggestions = agent.get_voice_suggestions()
    assert "Koi alert hai?" in suggestions
    for text in suggestions:
        assert agent.classify(text).intent != Intent.UNKNOWN

@pytest.mark.parametrize("text", ["khad batao", "urea batao", "dap batao", "खाद बताओ", "fertilizer samjhao"])
def test_asking_words_do_not_pull_toward_help(agent, text):
    assert agent.classify(text).intent == Intent.ASK_FERTILIZER

@pytest.mark.parametrize("text", ["batao", "samjhao please", "बताओ"])
def test_bare_asking_words_are_help(agent, text):
    assert agent.classify(text).intent == Intent.HELP

def test_mausam_batao_is_weather(agent):
    assert agent.classify("mausam batao").intent == Intent.ASK_WEATHER

@pytest.mark.parametrize("text", [
    "Patte peele ho rahe hain",
    "paudhe murjha rahe hain",
    "gehun mein maahu lag gaya",
    "पत्तियों पर छेद हैं",
])
def test_symptoms_are_crop_health(agent, text):
    assert agent.classify(text).intent == Intent.ASK_CROP_HEALTH
