"""Rolling conventions for mapping non-business days to business days."""

from enum import Enum

from bizcal.core.errors import UnknownConventionError


class RollingConvention(Enum):
    FOLLOWING = "Following"
    MODIFIED_FOLLOWING = "ModifiedFollowing"
    PRECEDING = "Preceding"
    MODIFIED_PRECEDING = "ModifiedPreceding"
    MONTH_END_REFERENCE = "MonthEndReference"
    UNADJUSTED = "Unadjusted"

    @classmethod
    def coerce(cls, value) -> "RollingConvention":
        """Accept a member, its market name ('ModifiedFollowing') or member name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for member in cls:
                if key == member.value or key.upper() == member.name:
                    return member
        raise UnknownConventionError(f"Unknown rolling convention: {value!r}")

    @property
    def is_forward(self) -> bool:
        return self in FORWARD_CONVENTIONS

    @property
    def is_backward(self) -> bool:
        return self in BACKWARD_CONVENTIONS


FORWARD_CONVENTIONS = frozenset(
    {
        RollingConvention.FOLLOWING,
        RollingConvention.MODIFIED_FOLLOWING,
        RollingConvention.MONTH_END_REFERENCE,
    }
)
BACKWARD_CONVENTIONS = frozenset(
    {RollingConvention.PRECEDING, RollingConvention.MODIFIED_PRECEDING}
)
