from functools import lru_cache

from spacehive.core.config import settings
from spacehive.application.ports.navigation import NavigationPort
from spacehive.application.ports.session_store import SessionStorePort
from spacehive.application.ports.venue_catalog import VenueCatalogPort
from spacehive.application.use_cases.booking_form import BookingFormUseCase
from spacehive.application.use_cases.booking_wizard import BookingFormWizard
from spacehive.application.use_cases.instant_booking import InstantBookingUseCase
from spacehive.application.use_cases.match_request import MatchRequestUseCase
from spacehive.infrastructure.catalog.mock_catalog import MockVenueCatalog
from spacehive.infrastructure.navigation.recording_navigator import RecordingNavigator
from spacehive.infrastructure.store.memory_store import MemorySessionStore
from spacehive.infrastructure.timers.debouncer import TimerDebouncer


@lru_cache
def get_session_store() -> SessionStorePort:
    return MemorySessionStore(session_limit=settings.SESSION_LIMIT)


@lru_cache
def get_navigator() -> NavigationPort:
    return RecordingNavigator(history_limit=settings.NAVIGATION_HISTORY_LIMIT)


@lru_cache
def get_venue_catalog() -> VenueCatalogPort:
    return MockVenueCatalog()


def get_booking_wizard() -> BookingFormWizard:
    return BookingFormWizard(budget_ceiling=settings.BUDGET_CEILING)


def get_booking_form_use_case() -> BookingFormUseCase:
    return BookingFormUseCase(
        wizard=get_booking_wizard(),
        store=get_session_store(),
        navigator=get_navigator(),
    )


def get_match_request_use_case() -> MatchRequestUseCase:
    return MatchRequestUseCase(
        store=get_session_store(),
        navigator=get_navigator(),
        notes_max_length=settings.MATCH_NOTES_MAX_LENGTH,
    )


@lru_cache
def get_instant_booking_use_case() -> InstantBookingUseCase:
    return InstantBookingUseCase(
        catalog=get_venue_catalog(),
        store=get_session_store(),
        navigator=get_navigator(),
        debouncer=TimerDebouncer(delay_seconds=settings.MARKER_DEBOUNCE_SECONDS),
        default_hours=settings.DEFAULT_BOOKING_HOURS,
        min_hours=settings.MIN_BOOKING_HOURS,
    )


def get_container() -> dict[str, object]:
    return {
        "booking_form": get_booking_form_use_case(),
        "match_request": get_match_request_use_case(),
        "instant_booking": get_instant_booking_use_case(),
        "navigator": get_navigator(),
        "catalog": get_venue_catalog(),
    }
