"""Distance metric identifiers understood by the k-NN engines."""

from enum import Enum


class SpaceType(str, Enum):
    UNDEFINED = "undefined"
    L2 = "l2"
    COSINESIMIL = "cosinesimil"
    LINF = "linf"
    L1 = "l1"
    INNER_PRODUCT = "innerproduct"
    HAMMING = "hamming"
    HAMMINGBIT = "hammingbit"

    @classmethod
    def from_value(cls, value: str) -> "SpaceType":
        """Parse a space type name. Raises ValueError if unknown."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValueError(f"Unsupported space type: {value!r}. Use one of: {allowed}") from None
