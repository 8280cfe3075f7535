"""
Identity Claim
==============

Verified GitHub identity, as handed over by the OAuth collaborator.

Version: 0.1.0
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from badge_registrar.models.field import (
    FIELD_PRIME,
    format_field_element,
    parse_field_element,
)


class GitHubIdentityClaim(BaseModel):
    """
    A GitHub account bound to a StarkNet user account.

    The claim is trusted as-is: it is produced after the OAuth exchange
    and the GitHub user lookup have already succeeded.
    """

    model_config = ConfigDict(frozen=True)

    github_user_id: int = Field(..., gt=0, description="Numeric GitHub user ID")
    user_address: int = Field(..., description="StarkNet account receiving the badge")

    @field_validator("user_address", mode="before")
    @classmethod
    def parse_user_address(cls, v: str | int) -> int:
        """Accept hex strings for the user address."""
        if isinstance(v, str):
            return parse_field_element(v)
        if isinstance(v, int) and not 0 <= v < FIELD_PRIME:
            raise ValueError("Value is outside the STARK field")
        return v

    def to_calldata(self) -> list[int]:
        """Arguments of the registry invocation."""
        return [self.user_address, self.github_user_id]

    def __str__(self) -> str:
        return f"github:{self.github_user_id} -> {format_field_element(self.user_address)}"
