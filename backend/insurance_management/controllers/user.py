"""
User controller: registration, account CRUD and email/password login.

Unknown email and wrong password raise the same AuthenticationError so the
response never reveals whether an account exists.
"""

from __future__ import annotations

from insurance_management import mappers
from insurance_management.api.schemas.user import InsertUserDTO, LoginResponse, UpdateUserDTO, UserDTO
from insurance_management.controllers.base import EntityController
from insurance_management.core.config import settings
from insurance_management.core.constants import ErrorCode, Messages
from insurance_management.core.errors import AuthenticationError, FieldValidationError
from insurance_management.core.security import PasswordHasher, TokenIssuer
from insurance_management.db.models.user import User
from insurance_management.repositories.users import UserRepository


class UserController(EntityController[User, UserDTO]):
    entity_name = "user"
    repository: UserRepository

    def __init__(
        self,
        repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> None:
        super().__init__(repository)
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer

    def to_dto(self, entity: User) -> UserDTO:
        return mappers.user_to_dto(entity)

    def apply_update(self, entity: User, dto: UpdateUserDTO) -> User:
        return mappers.apply_user_update(entity, dto)

    async def create(self, dto: InsertUserDTO) -> UserDTO:
        """Register a new account with a hashed password."""
        if await self.repository.get_by_email(dto.email) is not None:
            raise FieldValidationError({"email": [Messages.EMAIL_TAKEN]}, entity=self.entity_name)

        user = mappers.user_from_insert(dto, self.password_hasher.hash_password(dto.password))
        created = await self.repository.create(user)
        self.logger.info("user registered", entity_id=str(created.id))
        return self.to_dto(created)

    async def get_by_email_and_password(self, email: str, password: str) -> LoginResponse:
        """Authenticate and issue an access token."""
        user = await self.repository.get_by_email(email)
        if user is None or not self.password_hasher.verify_password(password, user.password):
            self.logger.info("login rejected", account_exists=user is not None)
            raise AuthenticationError(
                Messages.ACCOUNT_NOT_FOUND,
                error_code=ErrorCode.ACCOUNT_NOT_FOUND,
                entity=self.entity_name,
            )

        profile = self.to_dto(user)
        token = self.token_issuer.create_token(profile)
        self.logger.info("login succeeded", entity_id=str(user.id))
        return LoginResponse(
            token=token,
            token_type="bearer",
            expires_in=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60,
            user=profile,
        )
