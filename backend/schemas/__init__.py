from schemas.shared import ErrorResponse
from schemas.event import (
    CategoryListResponse,
    Event,
    EventAction,
    EventCollection,
    EventResponse,
)
from schemas.catalog import (
    ActionButton,
    ActionRequest,
    ActionResponse,
    ActionResult,
    CatalogMeta,
    CatalogViewResponse,
    DetailsView,
    EventCard,
    FilterButton,
    FilterControls,
    InteractionRequest,
    UIEvent,
    UITarget,
)
from schemas.signup import PasswordStrength, SignupField, SignupForm, SignupValidationResponse

__all__ = [
    "ErrorResponse",
    "Event", "EventAction", "EventCollection", "EventResponse", "CategoryListResponse",
    "ActionButton", "EventCard", "DetailsView", "ActionResult",
    "FilterButton", "FilterControls", "UIEvent", "UITarget",
    "ActionRequest", "ActionResponse", "InteractionRequest",
    "CatalogMeta", "CatalogViewResponse",
    "SignupField", "SignupForm", "PasswordStrength", "SignupValidationResponse",
]
