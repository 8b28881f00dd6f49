"""Customer records."""

from dataclasses import dataclass

from ..core.exceptions import ValidationError
from ..core.types import Entity

MAX_NAME_LENGTH = 255


@dataclass
class Customer(Entity):
    """A grocery store customer."""

    name: str = ""

    def validate(self) -> None:
        """Check the customer can be stored.

        Raises:
            ValidationError: If the name is blank or too long.
        """
        if self.name is None or not str(self.name).strip():
            raise ValidationError("Customer name must not be empty")
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"Customer name must be at most {MAX_NAME_LENGTH} characters"
            )
