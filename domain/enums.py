"""
Domain enums for MealPrep application.
Contains all enumeration types used across the domain models.
"""

import enum


class MealSlot(str, enum.Enum):
    """Meal slots of a day plan. Declaration order is the positional fill order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


MEAL_SLOTS = tuple(MealSlot)


class ItemSource(str, enum.Enum):
    """Where a planned item came from"""

    PANTRY = "pantry"
    CUSTOM = "custom"
    RECIPE = "recipe"
    SEARCH = "search"


class Weekday(str, enum.Enum):
    """Day names used by generated weekly plans"""

    SUN = "Sun"
    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"


# Positional week: offset 0 is always Sun
WEEKDAY_ORDER = tuple(Weekday)
