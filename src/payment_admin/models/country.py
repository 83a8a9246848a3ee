from dataclasses import dataclass


@dataclass(frozen=True)
class Country:
    id: int
    name: str
    two_letter_iso_code: str = ""
    published: bool = True
    display_order: int = 0
