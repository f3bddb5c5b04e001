"""Pydantic models for recordkit configuration."""

from typing import Literal

from recordkit.models import RecordkitBaseModel


class RecordkitConfigModel(RecordkitBaseModel):
    """Engine configuration.

    Attributes:
        inaccessible_input: What to do when construction input contains a
            field that is declared but not accessible. ``reject`` raises
            :class:`~recordkit.errors.InaccessibleFieldError`; ``ignore`` skips
            the value.
        null_as_absent: Treat ``None`` input values as if the key were missing.
        strict_types: Reject declared type names that are neither scalar
            keywords, pseudo-types nor registered records, instead of
            treating them as ``mixed``.

    Example:
        >>> config = RecordkitConfigModel(strict_types=True)
        >>> config.inaccessible_input
        'reject'
    """

    inaccessible_input: Literal["reject", "ignore"] = "reject"
    null_as_absent: bool = False
    strict_types: bool = False
