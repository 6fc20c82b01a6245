"""Domain value objects for discussion threads.

Both values are opaque to the engine: an author label is only displayed and
an avatar reference is only forwarded to whoever resolves images.
"""

from pydantic import field_validator

from discuss.domain.value.common import RootValueObject


class AuthorLabel(RootValueObject[str]):
    """Display name of a comment author, supplied by the session provider.

    Any string is accepted; the engine never interprets it.
    """

    @property
    def initial(self) -> str:
        """First visible character, used as the avatar fallback.

        Empty when the label is blank.
        """
        return self.root.strip()[:1]


class AvatarRef(RootValueObject[str]):
    """Opaque reference to an avatar resource (URL, storage key, ...)."""

    @field_validator("root")
    @classmethod
    def validate_ref(cls, v: str) -> str:
        if not v:
            raise ValueError("Avatar reference must not be empty")
        return v
