# agents/intent/patterns.py
"""
Keyword and phrase tables for intent detection.

Each intent lists its transliterated (Hinglish), Devanagari and English
variants together; all variants go through the same normalizer and scorer.
Table order is the final tie-break.
"""
from typing import Dict, Tuple

from agents.intent.models import Intent, NavigationTarget

INTENT_PATTERNS: Dict[Intent, Tuple[str, ...]] = {
    Intent.ASK_TEMPERATURE: (
        "temperature", "temp", "temperature kya hai", "aaj ka temp", "how hot",
        "degree", "taapmaan", "taapman", "tapman", "garmi", "kitni garmi",
        "kitna garam", "thand",
        "तापमान", "गर्मी", "गरम", "ठंड", "कितनी ठंड", "कितना गर्म",
    ),
    Intent.ASK_HUMIDITY: (
        "humidity", "humidity kitni hai", "air moisture", "hawa mein nami",
        "hawa ki nami", "aardrata",
        "आर्द्रता", "हवा में नमी",
    ),
    Intent.ASK_SOIL_MOISTURE: (
        "soil moisture", "soil moisture check karo", "check soil", "soil check",
        "moisture level", "mitti ki nami", "mitti nami", "mitti kaisi",
        "mitti check", "nami kitni", "bhumi nami",
        "मिट्टी की नमी", "मिट्टी नमी", "कितनी नमी", "जमीन की नमी",
    ),
    Intent.ASK_WEATHER: (
        "weather", "weather today", "forecast", "rain", "will it rain",
        "mausam", "mausam kaisa hai", "barish", "baarish", "dhoop", "badal",
        "मौसम", "बारिश", "बारिश होगी", "धूप", "बादल",
    ),
    Intent.ASK_IRRIGATION: (
        "irrigation", "irrigate", "irrigation today", "watering",
        "should i water", "should i irrigate", "water the crop",
        "paani", "pani", "paani dena", "paani dena hai", "aaj paani",
        "paani lagana", "sichai", "sinchai", "seenchna",
        "सिंचाई", "पानी", "पानी देना", "पानी डालना", "पानी लगाना", "सींचना",
    ),
    Intent.ASK_FERTILIZER: (
        "fertilizer", "fertiliser", "fertilizer advice", "fertilizer batao",
        "urea", "dap", "potash", "npk", "khad", "khaad", "khad dena",
        "konsi khad", "kitni khad", "urvarak",
        "खाद", "यूरिया", "पोटाश", "कौनसी खाद", "कितनी खाद", "उर्वरक",
    ),
    Intent.ASK_CROP_HEALTH: (
        "crop health", "plant health", "crop status", "crop condition",
        "fasal kaisi", "fasal kaisi hai", "fasal theek", "paudhe kaise",
        "फसल कैसी", "फसल ठीक", "फसल की हालत", "पौधे कैसे",
        "disease", "pest", "yellow leaves", "white powder", "brown spots", "holes in leaves",
        "peele", "peeli", "peele patte", "murjha", "murjhana", "murjha rahe", "bimari", "rog",
        "keede", "keet", "aphid", "maahu", "chepa", "safed powder", "bhure dhabbe", "chhed",
        "पीली पत्तियां", "मुरझा", "मुरझाना", "कीड़े", "बीमारी", "रोग", "माहू", "छेद",
    ),
    Intent.ASK_WATER_AMOUNT: (
        "how much water", "water amount", "kitna paani", "kitna paani dena hai",
        "paani kitna", "mm paani", "kitne litre", "litre", "bucket",
        "कितना पानी", "लीटर", "बाल्टी",
    ),
    Intent.ASK_ALERTS: (
        "alert", "alerts", "warning", "any issue", "notification",
        "koi alert", "koi alert hai", "koi problem", "dikkat", "khabar",
        "चेतावनी", "अलर्ट", "दिक्कत", "कोई समस्या",
    ),
    Intent.GREETING: (
        "hi", "hello", "hey", "good morning", "good afternoon", "good evening",
        "how are you", "namaste", "namaskar", "pranam", "jai hind",
        "suprabhat", "kaise ho", "aap kaise ho",
        "नमस्ते", "नमस्कार", "प्रणाम", "कैसे हो", "आप कैसे हो",
    ),
    Intent.THANKS: (
        "thanks", "thank you", "great", "awesome", "dhanyawad", "shukriya",
        "bahut achha",
        "धन्यवाद", "शुक्रिया", "बहुत अच्छा",
    ),
    Intent.HELP: (
        "help", "what can you do", "guide", "explain", "madad", "sahayata",
        "kya kar sakte ho", "samjhao", "batao", "kaise use kare",
        "मदद", "सहायता", "क्या कर सकते हो", "समझाओ", "बताओ",
    ),
    Intent.NAV_DASHBOARD: (
        "dashboard", "home", "main screen", "open dashboard", "go to dashboard",
        "dashboard dikhao", "dashboard kholo", "ghar", "mukhya",
        "होम", "डैशबोर्ड",
    ),
    Intent.NAV_IRRIGATION: (
        "open irrigation", "go to irrigation", "irrigation page", "water screen",
        "irrigation dikhao", "irrigation kholo", "sinchai dikhao",
        "sichai page", "paani screen",
        "सिंचाई दिखाओ",
    ),
    Intent.NAV_ALERTS: (
        "open alerts", "show alerts", "go to alerts", "warnings show",
        "alerts dikhao", "alert dikhao", "alerts kholo", "notification dikhao",
        "chetawani dikhao",
        "अलर्ट दिखाओ", "चेतावनी दिखाओ",
    ),
    Intent.NAV_ASSISTANT: (
        "open assistant", "go to assistant", "assistant kholo",
        "assistant dikhao", "chat kholo", "madad kholo", "baat karo",
        "chat karo", "bot kholo",
        "सहायक खोलो", "मदद खोलो",
    ),
}

# Filler words that never decide an intent on their own
# Asking words ("tell me", "explain"). A HELP phrase made only of these
# matches only when the input has nothing else in it.
HELPER_WORDS = frozenset({
    "batao", "bataiye", "bataao", "samjhao", "samjhaiye", "guide", "explain",
    "बताओ", "बताइए", "समझाओ", "समझाइए",
})

STOPWORDS = frozenset({
    "a", "an", "the", "is", "are", "to", "do", "i", "me", "my", "what", "please",
    "hai", "hain", "kya", "ka", "ki", "ke", "ko", "mein", "aaj", "kal",
    "karo", "kare", "karein", "de", "dena", "se", "aur",
    "है", "क्या", "का", "की", "के", "को", "में", "आज",
})

CROP_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    "wheat": ("wheat", "gehun", "gehu", "gehoon", "kanak", "गेहूं", "गेहूँ", "गेहुँ", "कनक"),
    "rice": ("rice", "paddy", "chawal", "dhan", "dhaan", "चावल", "धान"),
    "cotton": ("cotton", "kapas", "rui", "कपास", "रूई"),
}

STAGE_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    "sowing": ("sowing", "plantation", "buwai", "ropai", "बुवाई", "रोपाई"),
    "vegetative": ("vegetative", "growth", "growing", "badhwar", "बढ़वार"),
    "flowering": ("flowering", "bloom", "phool", "baal", "फूल", "बाल"),
    "harvesting": ("harvest", "harvesting", "katai", "tudai", "कटाई", "तुड़ाई"),
}

NAVIGATION_TARGETS: Dict[Intent, NavigationTarget] = {
    Intent.NAV_DASHBOARD: NavigationTarget.DASHBOARD,
    Intent.NAV_IRRIGATION: NavigationTarget.IRRIGATION,
    Intent.ASK_IRRIGATION: NavigationTarget.IRRIGATION,
    Intent.ASK_WATER_AMOUNT: NavigationTarget.IRRIGATION,
    Intent.NAV_ALERTS: NavigationTarget.ALERTS,
    Intent.ASK_ALERTS: NavigationTarget.ALERTS,
    Intent.NAV_ASSISTANT: NavigationTarget.ASSISTANT,
}

VOICE_COMMAND_SUGGESTIONS: Tuple[str, ...] = (
    "Aaj kitna paani dena hai?",
    "Temperature kya hai?",
    "Soil moisture check karo",
    "Fertilizer advice do",
    "Mausam kaisa hai?",
    "Fasal kaisi hai?",
    "Koi alert hai?",
)
