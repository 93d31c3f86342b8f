# gateway/client.py
"""
Advisory gateway - remote advisory endpoint with offline fallback and replay queue
"""
import asyncio
import logging
from typing import Any, List, Optional

import httpx

from agents.assistant.models import AdvisoryEnvelope
from core.cache import KeyValueStore
from core.config import Settings, get_settings
from core.exceptions import ReadingValidationError, RemoteUnavailableError
from gateway.fallback import LocalFallback, is_state_changing, normalize_path, normalize_target
from gateway.models import ConnectivityState, PendingRequest

logger = logging.getLogger("gateway.client")

MIRRORED_PATHS = ("/sensors", "/weather")

class AdvisoryGateway:
    """
    Calls the remote advisory service and falls back to the local engines.

    - Each request gets 1 + retries attempts, each raced against timeout_s
    - Any failure marks the gateway OFFLINE; while offline no network
      call is made until check_health() succeeds
    - State-changing requests answered locally are queued (FIFO) in the
      key-value store and replayed on reconnect
    """

    def __init__(
        self,
        fallback: LocalFallback,
        kv_store: KeyValueStore,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        self.settings = settings or get_settings()
        config = self.settings.get_agent_config("gateway")
        self.base_url = config.get("base_url", "http://localhost:3002/api")
        self.timeout_s = float(config.get("timeout_s", 10.0))
        self.retries = int(config.get("retries", 2))
        self.health_timeout_s = float(config.get("health_timeout_s", 3.0))
        self.pending_key = config.get("pending_key", "gateway:pending_requests")

        self.fallback = fallback
        self.kv_store = kv_store
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=self.base_url)
        self.state = ConnectivityState.OFFLINE if config.get("start_offline") else ConnectivityState.ONLINE

    async def __aenter__(self) -> "AdvisoryGateway":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @property
    def is_online(self) -> bool:
        return self.state == ConnectivityState.ONLINE

    def go_offline(self) -> None:
        """Platform reported loss of connectivity"""
        if self.state != ConnectivityState.OFFLINE:
            logger.info("Gateway offline")
        self.state = ConnectivityState.OFFLINE

    # ---------- REQUESTS ----------

    async def request(self, method: str, path: str, payload: Optional[Any] = None) -> AdvisoryEnvelope:
        """Remote envelope when reachable, otherwise the locally derived one"""
        method = method.upper()
        path = normalize_target(path)

        if self.state != ConnectivityState.OFFLINE:
            try:
                envelope = await self._send(method, path, payload, self.timeout_s)
            except RemoteUnavailableError as e:
                logger.warning(f"{e}; switching to offline mode")
                self.state = ConnectivityState.OFFLINE
            else:
                self.state = ConnectivityState.ONLINE
                self._mirror(method, normalize_path(path), envelope)
                return envelope

        return await self._fallback(method, path, payload)

    async def get(self, path: str) -> AdvisoryEnvelope:
        return await self.request("GET", path)

    async def post(self, path: str, payload: Optional[Any] = None) -> AdvisoryEnvelope:
        return await self.request("POST", path, payload)

    async def _send(self, method: str, path: str, payload: Optional[Any], timeout_s: float,
                    retries: Optional[int] = None) -> AdvisoryEnvelope:
        attempts = 1 + (self.retries if retries is None else retries)
        last_error: Optional[Exception] = None

        for attempt in range(attempts):
            if attempt > 0:
                self.state = ConnectivityState.RETRYING
            try:
                return await asyncio.wait_for(self._attempt(method, path, payload), timeout=timeout_s)
            except (asyncio.TimeoutError, httpx.HTTPError, ValueError) as e:
                last_error = e
                logger.warning(f"Attempt {attempt + 1}/{attempts} for {method} {path} failed: {e!r}")

        raise RemoteUnavailableError(f"{method} {path} failed after {attempts} attempts") from last_error

    async def _attempt(self, method: str, path: str, payload: Optional[Any]) -> AdvisoryEnvelope:
        json_body = payload if method != "GET" else None
        response = await self._client.request(method, path, json=json_body)
        response.raise_for_status()
        body = response.json()
        if not isinstance(body, dict):
            raise ValueError(f"Expected a JSON object from {method} {path}, got {type(body).__name__}")
        return AdvisoryEnvelope.model_validate({**body, "offline": False})

    async def _fallback(self, method: str, path: str, payload: Optional[Any]) -> AdvisoryEnvelope:
        logger.info(f"Using offline fallback for: {method} {path}")
        envelope = self.fallback.handle(method, path, payload)
        if envelope.success and is_state_changing(method, path):
            await self._enqueue(PendingRequest(method=method, path=path, payload=payload))
        return envelope

    def _mirror(self, method: str, route: str, envelope: AdvisoryEnvelope) -> None:
        if method != "GET" or route not in MIRRORED_PATHS:
            return
        if not envelope.success or not isinstance(envelope.data, dict):
            return
        try:
            self.fallback.mirror(route, envelope.data)
        except ReadingValidationError as e:
            logger.warning(f"Could not mirror remote {route} locally: {e}")

    # ---------- QUEUE ----------

    async def _enqueue(self, request: PendingRequest) -> None:
        pending = list(await self.kv_store.get(self.pending_key) or [])
        pending.append(request.model_dump(mode="json"))
        await self.kv_store.set(self.pending_key, pending)
        logger.info(f"Queued {request.method} {request.path} for sync ({len(pending)} pending)")

    async def pending_requests(self) -> List[PendingRequest]:
        pending = await self.kv_store.get(self.pending_key) or []
        return [PendingRequest.model_validate(item) for item in pending]

    async def replay_pending(self) -> int:
        """
        Replay queued requests in FIFO order.

        Stops at the first failure and puts it, with everything after it,
        back at the head of the queue. Returns how many were delivered.
        """
        pending = list(await self.kv_store.get(self.pending_key) or [])
        if not pending:
            return 0

        await self.kv_store.set(self.pending_key, [])
        logger.info(f"Syncing pending requests: {len(pending)}")

        delivered = 0
        for index, item in enumerate(pending):
            request = PendingRequest.model_validate(item)
            try:
                await self._send(request.method, request.path, request.payload, self.timeout_s)
            except RemoteUnavailableError as e:
                logger.debug(f"Sync failed, re-queueing {len(pending) - index} requests: {e}")
                queued_since = list(await self.kv_store.get(self.pending_key) or [])
                await self.kv_store.set(self.pending_key, pending[index:] + queued_since)
                self.state = ConnectivityState.OFFLINE
                return delivered
            delivered += 1

        self.state = ConnectivityState.ONLINE
        return delivered

    # ---------- HEALTH ----------

    async def check_health(self) -> bool:
        """Probe GET /health once; on success go online and replay the queue"""
        try:
            envelope = await self._send("GET", "/health", None, self.health_timeout_s, retries=0)
        except RemoteUnavailableError:
            self.state = ConnectivityState.OFFLINE
            return False

        if not envelope.success:
            self.state = ConnectivityState.OFFLINE
            return False

        self.state = ConnectivityState.ONLINE
        await self.replay_pending()
        return True
