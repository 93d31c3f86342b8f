# scripts/smoke_assistant.py
"""
Manual walkthrough: the assistant on its own, then through the gateway
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from agents.assistant.agent import AssistantAgent
from core.cache import CacheManager
from core.config import get_settings
from core.logging import setup_logging
from gateway.client import AdvisoryGateway
from gateway.fallback import LocalFallback

SAMPLE_QUERIES = [
    "Namaste",
    "Aaj paani dena hai kya?",
    "Kitna paani dena hai?",
    "Temperature kya hai?",
    "Mausam kaisa hai?",
    "Dhan ke liye fertilizer batao",
    "Fasal kaisi hai?",
    "Koi alert hai?",
    "alerts dikhao",
    "xyz abc",
]

def test_assistant(assistant: AssistantAgent) -> bool:
    """Run the sample queries against the local engines"""

    print("🧪 Testing Assistant")
    print("=" * 50)

    try:
        for query in SAMPLE_QUERIES:
            response = assistant.accept_utterance(query)
            print(f"\n🗣️  {query}")
            print(f"   Intent: {response.intent.value} → {response.navigation_target}")
            print(f"   {response.localized_text}")
            if response.action:
                print(f"   Action: {response.action} {response.value or ''}{response.unit or ''}")

        print("\nDry field, hot afternoon:")
        assistant.update_sensors({"soil_moisture_pct": 20, "temperature_c": 38})
        print(f"   {assistant.accept_utterance('paani dena hai').localized_text}")
        for alert in assistant.current_alerts():
            print(f"   [{alert.severity.value}] {alert.localized_message}")

        print("\nRandom reading:")
        reading = assistant.store.randomize()
        print(f"   {reading.model_dump()}")
        print(f"   {assistant.accept_utterance('irrigation').localized_text}")

        print("\n✅ Assistant walkthrough finished!")
        return True

    except Exception as e:
        print(f"\n❌ Walkthrough failed: {e}")
        import traceback
        traceback.print_exc()
        return False

async def test_gateway(assistant: AssistantAgent) -> bool:
    """Talk to the reference service; falls back locally if it is not running"""

    print("\n🌐 Testing Gateway")
    print("=" * 50)

    settings = get_settings()
    async with AdvisoryGateway(LocalFallback(assistant), CacheManager(settings.cache_max_size), settings) as gateway:
        online = await gateway.check_health()
        print(f"1. Health: {'online' if online else 'offline'} ({gateway.base_url})")

        envelope = await gateway.get("/irrigation")
        print(f"2. Irrigation (offline={envelope.offline}): {envelope.message}")

        envelope = await gateway.post("/sensors", {"soil_moisture_pct": 55})
        print(f"3. Sensor push (offline={envelope.offline}): {envelope.message}")

        pending = await gateway.pending_requests()
        print(f"4. Pending sync queue: {len(pending)}")

    return True

async def main():
    """Run the walkthrough"""

    print("🚀 AgriGuard Smoke Test")
    print("=" * 50)

    setup_logging(get_settings())

    assistant = AssistantAgent()
    assistant_ok = test_assistant(assistant)
    await test_gateway(assistant)

    print("\n📝 Note: To exercise the remote path, start the service first:")
    print("   python run.py")

    if not assistant_ok:
        sys.exit(1)

if __name__ == "__main__":
    asyncio.run(main())
