"""Data types shared by the Dhrystone benchmark."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import IntEnum

STR_30_LENGTH = 30
ARR_DIM = 50


class Enumeration(IntEnum):
    """The five-valued enumeration used throughout the benchmark."""

    IDENT_1 = 0
    IDENT_2 = 1
    IDENT_3 = 2
    IDENT_4 = 3
    IDENT_5 = 4


@dataclass(eq=False)
class Record:
    """A benchmark record: a link to another record plus variant-1 fields.

    Records may link to themselves, so equality is identity and the link
    is left out of the representation.
    """

    ptr_comp: Record | None = field(default=None, repr=False)
    discr: Enumeration = Enumeration.IDENT_1
    enum_comp: Enumeration = Enumeration.IDENT_1
    int_comp: int = 0
    str_comp: str = ""

    def __post_init__(self) -> None:
        if len(self.str_comp) > STR_30_LENGTH:
            raise ValueError(
                f"str_comp holds at most {STR_30_LENGTH} characters, "
                f"got {len(self.str_comp)}"
            )

    def assign_from(self, other: Record) -> None:
        """Copy every field of ``other`` into this record, link included."""
        for f in fields(self):
            setattr(self, f.name, getattr(other, f.name))