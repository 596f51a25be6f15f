"""Domain Types — identity type and enumerations for the User entity.

Invariants:
    - UserId wraps the integer primary key generated by the store
    - Gender and Seniority are closed sets; anything else is a validation error

Design Decisions:
    - str Enums: serialize to JSON and to DB enum labels without custom encoders
"""

from enum import Enum
from typing import NewType


UserId = NewType("UserId", int)


class Gender(str, Enum):
    """Gender values accepted for a user."""
    MALE = "male"
    FEMALE = "female"
    X = "x"


class Seniority(str, Enum):
    """Seniority level within the organization."""
    TRAINEE = "trainee"
    JR = "jr"
    SEMI_SENIOR = "ssr"
    SENIOR = "senior"
