import logging

from fastapi import FastAPI

from spacehive.api.v1.booking_form import router as booking_form_router
from spacehive.api.v1.instant_booking import router as instant_booking_router
from spacehive.api.v1.match_requests import router as match_requests_router
from spacehive.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("session_id", "flow", "section", "screen", "step", "venue_id", "action"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=f"{settings.APP_NAME} Booking", version="1.0.0")

app.include_router(booking_form_router, prefix="/api/v1/booking-form", tags=["booking-form"])
app.include_router(match_requests_router, prefix="/api/v1/match-requests", tags=["match-requests"])
app.include_router(instant_booking_router, prefix="/api/v1/instant-booking", tags=["instant-booking"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
