"""
Services Package

Business logic modules for the cabin trip planner.
"""

from .errors import (
    TripError,
    ValidationError,
    DuplicateItem,
    UnsupportedOperation,
    NotFound,
    Forbidden,
    AuthFailure,
    StoreError,
    ConflictError,
)

from .store import (
    StoreClient,
    In,
    IEquals,
    IContains,
)

from .identity import (
    IdentityProvider,
    TripSession,
)

from .catalog import (
    MealCatalog,
    TrackedMeal,
    ExternalMenuMeal,
    meal_from_row,
)

from .ingredients import IngredientLedger

from .shopping import (
    aggregate_ingredients,
    build_shopping_list,
    meal_summaries,
)

from .linens import (
    LinenLedger,
    linen_totals,
)

from .arrivals import ArrivalLedger

__all__ = [
    # Errors
    'TripError',
    'ValidationError',
    'DuplicateItem',
    'UnsupportedOperation',
    'NotFound',
    'Forbidden',
    'AuthFailure',
    'StoreError',
    'ConflictError',
    # Store
    'StoreClient',
    'In',
    'IEquals',
    'IContains',
    # Identity
    'IdentityProvider',
    'TripSession',
    # Meals
    'MealCatalog',
    'TrackedMeal',
    'ExternalMenuMeal',
    'meal_from_row',
    # Ledgers
    'IngredientLedger',
    'LinenLedger',
    'linen_totals',
    'ArrivalLedger',
    # Shopping
    'aggregate_ingredients',
    'build_shopping_list',
    'meal_summaries',
]
