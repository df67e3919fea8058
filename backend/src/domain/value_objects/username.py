"""
Username Value Object.

Usernames are stored case-as-entered (that is how they appear as channel
message authors and in the user list). Direct-message addressing is
case-insensitive and uses the lower-cased canonical form.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Username:
    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("Username cannot be empty")

    @property
    def canonical(self) -> str:
        return self.value.lower()

    def __str__(self) -> str:
        return self.value
