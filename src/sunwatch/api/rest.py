"""REST API serving sunrise/sunset times and the daylight status."""

from datetime import date, timezone
from typing import Optional
from fastapi import FastAPI, HTTPException
import logging

from ..core.daylight import Daylight
from ..core.solar import NoSunEventError
from ..model.location import Location
from ..model.settings import Settings
from ..runtime.clock import Clock

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


class SunRestAPI:
    """HTTP front end over the solar calculator."""

    def __init__(self, clock: Clock, settings: Optional[Settings] = None):
        """Initialize REST API.

        Args:
            clock: Clock answering "now" for the status endpoint
            settings: Defaults for location and hour offset
        """
        self.clock = clock
        self.settings = settings or Settings()
        self.default_location = self.settings.resolve_location()
        self.app = FastAPI(
            title="sunwatch API",
            description="NOAA sunrise/sunset times and daylight status",
            version=API_VERSION,
        )

        # Setup routes
        self._setup_routes()

    def _daylight(self, latitude: Optional[float], longitude: Optional[float]) -> Daylight:
        """Build a Daylight from query parameters, falling back to the defaults."""
        try:
            loc = Location(
                latitude=self.default_location.latitude if latitude is None else latitude,
                longitude=self.default_location.longitude if longitude is None else longitude,
            )
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return loc.daylight()

    def _polar_error(self, e: NoSunEventError) -> HTTPException:
        logger.info(f"No sun event: {e}")
        return HTTPException(
            status_code=422,
            detail={"error": "no_sun_event", "kind": e.kind, "message": str(e)},
        )

    def _setup_routes(self) -> None:
        """Setup all API routes."""

        @self.app.get("/api/")
        async def api_discovery():
            """API discovery endpoint."""
            return {
                "message": "API running.",
                "version": API_VERSION,
            }

        @self.app.get("/api/sun")
        async def get_sun(
            date: Optional[str] = None,
            latitude: Optional[float] = None,
            longitude: Optional[float] = None,
            hour_offset: Optional[float] = None,
        ):
            """Sunrise and sunset for a date (default: today, UTC)."""
            daylight = self._daylight(latitude, longitude)
            offset = self.settings.hour_offset if hour_offset is None else hour_offset
            try:
                d = _parse_date(date) if date else self.clock.today()
            except ValueError as e:
                raise HTTPException(status_code=400, detail=str(e))

            try:
                rise_min, set_min = daylight.utc_minutes(d)
                sunrise, sunset = daylight.sunrise_sunset(d, self.settings.tz() or timezone.utc, offset)
            except NoSunEventError as e:
                raise self._polar_error(e)

            return {
                "date": d.isoformat(),
                "latitude": daylight.latitude,
                "longitude": daylight.longitude,
                "julian_date": daylight.julian_date(d),
                "sunrise_utc_min": rise_min,
                "sunset_utc_min": set_min,
                "day_length_min": set_min - rise_min,
                "sunrise": sunrise.isoformat(),
                "sunset": sunset.isoformat(),
            }

        @self.app.get("/api/status")
        async def get_status(
            latitude: Optional[float] = None,
            longitude: Optional[float] = None,
            hour_offset: Optional[float] = None,
        ):
            """Daylight or darkness right now."""
            daylight = self._daylight(latitude, longitude)
            offset = self.settings.hour_offset if hour_offset is None else hour_offset
            now = self.clock.now()
            dark = daylight.is_dark(now, offset)
            return {
                "time": now.isoformat(),
                "latitude": daylight.latitude,
                "longitude": daylight.longitude,
                "dark": dark,
                "status": 1 if dark else 0,
            }

        @self.app.get("/health")
        async def health_check():
            """Health check endpoint."""
            return {
                "status": "healthy",
                "timestamp": self.clock.now().isoformat(),
            }

    def get_app(self) -> FastAPI:
        """Get the FastAPI app instance."""
        return self.app


def _parse_date(value: str) -> date:
    return date.fromisoformat(value)
