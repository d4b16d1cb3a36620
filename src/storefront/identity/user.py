"""User aggregate: a registered shopper or administrator."""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String

from storefront.domain import storefront


class UserRole(Enum):
    USER = "user"
    ADMIN = "admin"


_FORBIDDEN_EMAIL_CHARS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\", " ", "\t", "\n")


def email_problem(email: str) -> str | None:
    """Return why ``email`` is not a usable address, or None when it is."""
    if not email or email.count("@") != 1:
        return "Email must contain exactly one @"
    local_part, domain_part = email.split("@", 1)
    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return "Email local part is malformed"
    if "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return "Email domain is malformed"
    if ".." in email:
        return "Email must not contain consecutive dots"
    if any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
        return "Email domain labels must not start or end with a hyphen"
    if any(char in email for char in _FORBIDDEN_EMAIL_CHARS):
        return "Email contains forbidden characters"
    return None


@storefront.aggregate
class User:
    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    age: Integer(min_value=0, max_value=150)
    password: String(required=True, max_length=255)  # bcrypt hash
    role: String(choices=UserRole, default=UserRole.USER.value)
    cart_id: Identifier()
    registered_at: DateTime()
    last_login_at: DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        problem = email_problem(self.email or "")
        if problem:
            raise ValidationError({"email": [problem]})

    @classmethod
    def register(cls, first_name, last_name, email, password_hash, age=None, cart_id=None, role=None):
        return cls(
            first_name=first_name,
            last_name=last_name,
            email=email.strip().lower(),
            age=age,
            password=password_hash,
            role=role or UserRole.USER.value,
            cart_id=cart_id,
            registered_at=datetime.now(UTC),
        )

    def record_login(self):
        self.last_login_at = datetime.now(UTC)

    def to_public_dict(self) -> dict:
        """User data safe to hand to clients: never includes the password hash."""
        return {
            "id": str(self.id),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "age": self.age,
            "role": self.role,
            "cart_id": str(self.cart_id) if self.cart_id else None,
        }
