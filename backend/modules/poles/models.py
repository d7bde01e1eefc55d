"""
Poles module data models.

These models define pole listings, the search filter contract and the
request bodies accepted by the listing endpoints.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, computed_field


# Physical bounds enforced on every listing write.
LENGTH_MIN_CM = 250
LENGTH_MAX_CM = 520
WEIGHT_MIN_LBS = 50
WEIGHT_MAX_LBS = 210
CONDITION_MIN = 1
CONDITION_MAX = 5

# Four-digit Norwegian postal code.
POSTAL_CODE_PATTERN = r"^[0-9]{4}$"


class PoleStatus(str, Enum):
    """Listing lifecycle status."""

    AVAILABLE = "available"
    RENTED = "rented"
    RESERVED = "reserved"
    FOR_SALE = "for_sale"
    UNAVAILABLE = "unavailable"


# Statuses shown on the public browse page when the caller does not choose.
PUBLIC_STATUSES: frozenset[PoleStatus] = frozenset(
    {PoleStatus.AVAILABLE, PoleStatus.FOR_SALE}
)


class PoleOrder(str, Enum):
    """Result ordering, chosen by the caller rather than the filter."""

    LENGTH_ASC = "length"
    NEWEST_FIRST = "newest"


# Suggested brands for the listing form. Not enforced at the data layer.
POLE_BRANDS: tuple[str, ...] = (
    "Altius Carbon Elite",
    "Altius Fiberglass",
    "Altius Suhr Adrenaline",
    "Essx",
    "Essx Launch",
    "Essx Power X",
    "Essx Recoil",
    "Essx Recoil Advanced",
    "Fibersport Carbon",
    "Fibersport Carbon +",
    "Fibersport Non-Carbon",
    "Nordic",
    "Nordic Bifrost Glassfiber",
    "Nordic Bifrost Hybrid",
    "Nordic Evolution",
    "Nordic HiFly",
    "Pacer",
    "Pacer Carbon FX",
    "Pacer One",
    "Pacer Composite",
    "Pacer Mystic",
    "Annen",
)


class SearchFilters(BaseModel):
    """
    Sparse listing filter.

    Every present field adds one AND-ed predicate; absent fields impose no
    constraint. Ranges are inclusive at both ends. An empty ``status`` set
    is treated the same as an absent one.
    """

    length_min: Optional[int] = Field(None, description="Minimum length in cm (inclusive)")
    length_max: Optional[int] = Field(None, description="Maximum length in cm (inclusive)")
    weight_min: Optional[int] = Field(None, description="Minimum weight rating in lbs (inclusive)")
    weight_max: Optional[int] = Field(None, description="Maximum weight rating in lbs (inclusive)")
    municipality: Optional[str] = Field(None, description="Exact municipality")
    brand: Optional[str] = Field(None, description="Exact brand")
    condition_min: Optional[int] = Field(None, ge=CONDITION_MIN, le=CONDITION_MAX)
    status: Optional[frozenset[PoleStatus]] = Field(
        None,
        description="Allowed statuses (OR across members)",
    )

    model_config = {"frozen": True}


class PoleFields(BaseModel):
    """
    Writable listing fields, validated against the physical bounds.

    Used for both create and update: updates are full-field writes, the
    caller resubmits unchanged values from its pre-loaded form state.
    """

    length_cm: int = Field(..., ge=LENGTH_MIN_CM, le=LENGTH_MAX_CM)
    weight_lbs: int = Field(..., ge=WEIGHT_MIN_LBS, le=WEIGHT_MAX_LBS)
    brand: str = Field(..., min_length=1)
    condition_rating: int = Field(..., ge=CONDITION_MIN, le=CONDITION_MAX)
    status: PoleStatus = Field(default=PoleStatus.AVAILABLE)
    municipality: Optional[str] = Field(
        None,
        description="Derived from postal_code when omitted",
    )
    postal_code: str = Field(..., pattern=POSTAL_CODE_PATTERN)
    flex_rating: Optional[str] = None
    production_year: Optional[int] = None
    internal_notes: Optional[str] = None
    serial_number: Optional[str] = None
    price_weekly: Optional[float] = Field(None, ge=0)
    price_sale: Optional[float] = Field(None, ge=0)


class Pole(BaseModel):
    """A persisted pole listing."""

    id: str = Field(..., description="Pole ID")
    owner_id: str = Field(..., description="Owning user ID, immutable")
    length_cm: int
    weight_lbs: int
    brand: str
    condition_rating: int
    status: PoleStatus
    municipality: str
    postal_code: str
    flex_rating: Optional[str] = None
    production_year: Optional[int] = None
    image_urls: Optional[str] = None
    internal_notes: Optional[str] = None
    serial_number: Optional[str] = None
    price_weekly: Optional[float] = None
    price_sale: Optional[float] = None
    created_at: datetime
    updated_at: datetime

    def visible_to(self, viewer_id: Optional[str]) -> "Pole":
        """Copy of the listing with owner-only fields removed for other viewers."""
        if viewer_id == self.owner_id:
            return self
        return self.model_copy(update={"internal_notes": None})


class OwnerSummary(BaseModel):
    """Public profile fields of a listing owner."""

    name: Optional[str] = None
    email: Optional[str] = None
    club_name: Optional[str] = None


class PoleDetail(Pole):
    """A listing together with its owner's public profile."""

    owner: Optional[OwnerSummary] = None


class BulkPoleRow(BaseModel):
    """
    One row of a bulk listing submission.

    Rows are validated one at a time by the service so that a bad row is
    reported as a failure instead of rejecting the whole submission.
    """

    length_cm: Optional[int] = None
    weight_lbs: Optional[int] = None
    brand: str = ""
    condition_rating: int = 3
    status: PoleStatus = Field(default=PoleStatus.AVAILABLE)
    flex_rating: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.length_cm and self.weight_lbs and self.brand)


class BulkCreateRequest(BaseModel):
    """Several listings sharing one location."""

    postal_code: str = Field(..., pattern=POSTAL_CODE_PATTERN)
    municipality: Optional[str] = None
    poles: list[BulkPoleRow] = Field(..., min_length=1)


class BulkFailure(BaseModel):
    """A bulk row that could not be created."""

    index: int
    length_cm: Optional[int] = None
    weight_lbs: Optional[int] = None
    error: str


class BulkCreateResult(BaseModel):
    """Aggregate outcome of a bulk submission. Successful rows are not rolled back."""

    created: list[Pole] = Field(default_factory=list)
    failures: list[BulkFailure] = Field(default_factory=list)
    total: int = 0

    @computed_field
    @property
    def succeeded(self) -> int:
        return len(self.created)

    @computed_field
    @property
    def failed(self) -> int:
        return len(self.failures)
