"""
Poles module.

Public API:
- IPoleService: listing operations with ownership checks
- SearchFilters, build_predicates: typed listing filter and its translation
- Pole, PoleFields, PoleStatus, PoleOrder: listing models
"""

from .interfaces import IPoleService
from .filters import FILTER_TABLE, Predicate, build_predicates, apply_predicates
from .models import (
    POLE_BRANDS,
    PUBLIC_STATUSES,
    BulkCreateRequest,
    BulkCreateResult,
    Pole,
    PoleDetail,
    PoleFields,
    PoleOrder,
    PoleStatus,
    SearchFilters,
)
from .exceptions import (
    PoleNotFoundError,
    PoleAccessDeniedError,
    MunicipalityRequiredError,
)

__all__ = [
    "IPoleService",
    "FILTER_TABLE",
    "Predicate",
    "build_predicates",
    "apply_predicates",
    "POLE_BRANDS",
    "PUBLIC_STATUSES",
    "BulkCreateRequest",
    "BulkCreateResult",
    "Pole",
    "PoleDetail",
    "PoleFields",
    "PoleOrder",
    "PoleStatus",
    "SearchFilters",
    "PoleNotFoundError",
    "PoleAccessDeniedError",
    "MunicipalityRequiredError",
]
