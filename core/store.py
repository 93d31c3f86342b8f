# core/store.py
"""
Reading store - the single owned copy of the farm's sensor, weather and crop snapshot
"""
import logging
import random
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from core.exceptions import ReadingValidationError
from core.models import CropProfile, ReadingSnapshot, WeatherSnapshot, WeatherSource
from core.weather import DEFAULT_WEATHER_MAX_AGE_S, seasonal_weather

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

def _merge(model: ModelType, partial: Dict[str, Any], protected: tuple = ()) -> ModelType:
    """Validate partial against the model's fields and return the merged copy"""
    model_class: Type[ModelType] = type(model)
    unknown = [key for key in partial if key not in model_class.model_fields or key in protected]
    if unknown:
        raise ReadingValidationError(f"Unknown {model_class.__name__} fields: {unknown}")

    merged = {**model.model_dump(), **partial}
    try:
        return model_class.model_validate(merged)
    except ValidationError as e:
        raise ReadingValidationError(str(e)) from e

def _adopt(model_class: Type[ModelType], remote: Dict[str, Any]) -> ModelType:
    """Validate a full remote snapshot, ignoring fields this side does not know"""
    known = {key: value for key, value in remote.items() if key in model_class.model_fields}
    try:
        snapshot = model_class.model_validate(known)
    except ValidationError as e:
        raise ReadingValidationError(str(e)) from e
    stamp = getattr(snapshot, "last_updated", None)
    if stamp is not None and stamp.tzinfo is None:
        snapshot = snapshot.model_copy(update={"last_updated": stamp.replace(tzinfo=timezone.utc)})
    return snapshot

def _is_newer(remote: Optional[datetime], local: Optional[datetime]) -> bool:
    if local is None:
        return True
    return remote is not None and remote > local

class ReadingStore:
    """
    Holds the current reading, weather and crop profile for one farm.

    Getters hand out copies; all mutation goes through the update methods,
    which validate first and then replace the stored snapshot (last write wins).
    `revision` counts reading changes so callers can tell when derived
    state such as alerts is out of date.
    """

    def __init__(
        self,
        reading: Optional[ReadingSnapshot] = None,
        weather: Optional[WeatherSnapshot] = None,
        crop: Optional[CropProfile] = None,
        clock: Callable[[], datetime] = _utcnow,
        rng: Optional[random.Random] = None,
        weather_max_age_s: float = DEFAULT_WEATHER_MAX_AGE_S
    ):
        self._reading = reading.model_copy(deep=True) if reading else ReadingSnapshot()
        self._weather = weather.model_copy(deep=True) if weather else WeatherSnapshot()
        self._crop = crop.model_copy(deep=True) if crop else CropProfile()
        self._clock = clock
        self._rng = rng or random.Random()
        self._revision = 0
        self.weather_max_age = timedelta(seconds=weather_max_age_s)

    # ---------- READINGS ----------

    def get(self) -> ReadingSnapshot:
        return self._reading.model_copy(deep=True)

    @property
    def is_default(self) -> bool:
        """True until the first sensor or manual update"""
        return self._reading.last_updated is None

    @property
    def revision(self) -> int:
        return self._revision

    def update(self, partial: Optional[Dict[str, Any]] = None, **fields: Any) -> ReadingSnapshot:
        """Merge fields into the reading and stamp last_updated"""
        changes = {**(partial or {}), **fields}
        merged = _merge(self._reading, changes, protected=("last_updated",))
        merged.last_updated = self._next_stamp()
        self._replace_reading(merged)
        logger.debug(f"Sensor data updated: {changes}")
        return self.get()

    def sync_reading(self, remote: Dict[str, Any]) -> bool:
        """
        Adopt a reading fetched from the remote service.

        The remote stamp is kept as is. A reading older than the local one
        is ignored, so offline edits are not overwritten by stale data.
        Returns True when the local reading was replaced.
        """
        snapshot = _adopt(ReadingSnapshot, remote)
        if not _is_newer(snapshot.last_updated, self._reading.last_updated):
            logger.debug(f"Ignoring remote reading stamped {snapshot.last_updated}")
            return False
        self._replace_reading(snapshot)
        return True

    def preview(self, partial: Dict[str, Any]) -> ReadingSnapshot:
        """Validated merge of partial into a copy of the reading; nothing is stored"""
        return _merge(self._reading, partial, protected=("last_updated",))

    def randomize(self) -> ReadingSnapshot:
        """Demo aid: push a plausible random reading through the normal update path"""
        rng = self._rng
        return self.update(
            soil_moisture_pct=rng.randint(10, 90),
            temperature_c=rng.randint(15, 40),
            humidity_pct=rng.randint(40, 80),
            is_raining=rng.random() > 0.85,
            rain_probability_pct=rng.randint(0, 100)
        )

    def simulate_tick(self) -> ReadingSnapshot:
        """One evaporation step of the moisture simulation"""
        current = self._reading
        if current.is_raining:
            moisture = min(95.0, current.soil_moisture_pct + 5)
        else:
            decay = 2 if current.temperature_c > 35 else 1
            moisture = max(10.0, current.soil_moisture_pct - decay)
        return self.update(soil_moisture_pct=moisture)

    def _replace_reading(self, snapshot: ReadingSnapshot) -> None:
        self._reading = snapshot
        self._revision += 1

    def _next_stamp(self) -> datetime:
        stamp = self._clock()
        previous = self._reading.last_updated
        if previous is not None and stamp <= previous:
            stamp = previous + timedelta(microseconds=1)
        return stamp

    # ---------- WEATHER ----------

    def get_weather(self) -> WeatherSnapshot:
        """
        Cached weather while it is fresh, a seasonal estimate once it is
        older than weather_max_age. Weather that was never updated is
        served as stored.
        """
        stamp = self._weather.last_updated
        if stamp is not None:
            now = self._clock()
            if now - stamp > self.weather_max_age:
                logger.debug(f"Cached weather from {stamp} is stale, using seasonal estimate")
                return seasonal_weather(now)
        return self._weather.model_copy(deep=True)

    def update_weather(self, partial: Optional[Dict[str, Any]] = None, **fields: Any) -> WeatherSnapshot:
        changes = {**(partial or {}), **fields}
        merged = _merge(self._weather, changes, protected=("last_updated", "source"))
        self._weather = merged.model_copy(update={"last_updated": self._clock(), "source": WeatherSource.CACHED})
        logger.debug(f"Weather data updated: {changes}")
        return self.get_weather()

    def sync_weather(self, remote: Dict[str, Any]) -> bool:
        """Adopt remote weather unless the local copy is newer; mirrors sync_reading"""
        snapshot = _adopt(WeatherSnapshot, remote)
        if not _is_newer(snapshot.last_updated, self._weather.last_updated):
            logger.debug(f"Ignoring remote weather stamped {snapshot.last_updated}")
            return False
        self._weather = snapshot
        return True

    # ---------- CROP ----------

    def get_crop(self) -> CropProfile:
        return self._crop.model_copy(deep=True)

    def update_crop(self, partial: Optional[Dict[str, Any]] = None, **fields: Any) -> CropProfile:
        changes = {**(partial or {}), **fields}
        self._crop = _merge(self._crop, changes)
        logger.debug(f"Crop data updated: {changes}")
        return self.get_crop()
