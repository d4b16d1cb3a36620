"""User registration and login: commands and handler."""

import structlog
from protean import handle
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from storefront.config import get_settings
from storefront.domain import storefront
from storefront.errors import ErrorCode, StorefrontError
from storefront.identity.credentials import hash_password, verify_password
from storefront.identity.user import User, UserRole
from storefront.ordering.cart import Cart

logger = structlog.get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)
    age: Integer(min_value=0, max_value=150)


@storefront.command(part_of="User")
class LogIn:
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)


@storefront.command_handler(part_of=User)
class UserAccessHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise StorefrontError(ErrorCode.USER_ALREADY_EXISTS, cause=command.email)

        cart = Cart.create(owner_email=command.email.strip().lower())
        user = User.register(
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            password_hash=hash_password(command.password),
            age=command.age,
            cart_id=str(cart.id),
        )
        current_domain.repository_for(Cart).add(cart)
        repo.add(user)
        logger.info("User registered", user_id=str(user.id), cart_id=str(cart.id))
        return user.to_public_dict()

    @handle(LogIn)
    def log_in(self, command):
        """Return the public claims of the authenticated user."""
        settings = get_settings()
        email = command.email.strip().lower()
        if settings.admin_email and email == settings.admin_email.lower():
            if command.password != settings.admin_password:
                raise StorefrontError(ErrorCode.INVALID_CREDENTIALS)
            logger.info("Administrator logged in", email=email)
            return {
                "id": None,
                "first_name": "Admin",
                "last_name": "",
                "email": email,
                "age": None,
                "role": UserRole.ADMIN.value,
                "cart_id": None,
            }

        repo = current_domain.repository_for(User)
        user = repo.find_by_email(email)
        if user is None or not verify_password(command.password, user.password):
            logger.info("Rejected login", email=email)
            raise StorefrontError(ErrorCode.INVALID_CREDENTIALS)

        user.record_login()
        repo.add(user)
        return user.to_public_dict()
