from __future__ import annotations
from dataclasses import dataclass, replace

from .core.types import Gender

@dataclass(frozen=True)
class AgePolicy:
    """
    Knobs of the aggregate views.

    conceal_ages: hide the age of adult `concealed_gender` persons in BirthdayInfo.
    adult_age: whole-year age from which concealment applies.
    window_days: default horizon of the upcoming-birthday list.
    """
    conceal_ages: bool = True
    concealed_gender: Gender = "female"
    adult_age: int = 18
    window_days: int = 90

    def tweak(self, **kwargs) -> "AgePolicy":
        return replace(self, **kwargs)

    def conceals(self, gender: str, age: int) -> bool:
        return self.conceal_ages and gender == self.concealed_gender and age >= self.adult_age

DEFAULT_POLICY = AgePolicy()

# Admin views show every age.
OPEN_POLICY = DEFAULT_POLICY.tweak(conceal_ages=False)
