from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from marketplace.data.models.user import UserModel
from marketplace.domain.errors import DuplicateUsername, InvalidCredentials
from marketplace.domain.schemas import UserRead
from marketplace.repos.user_repo import UserRepo
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


class AccountService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def register(self, username: str, password: str) -> UserRead:
        # unikalnosc pilnuje baza (UNIQUE na username)
        try:
            created = self.repo.create_user(
                UserModel(username=username, password=password, role="user")
            )
        except IntegrityError:
            self.repo.rollback()
            logger.info(f"Registration rejected, username '{username}' taken")
            raise DuplicateUsername()

        logger.info(f"Registered user {created.id} '{created.username}'")
        return UserRead.model_validate(created)

    def login(self, username: str, password: str) -> UserRead:
        user = self.repo.find_by_credentials(username, password)
        if not user:
            logger.info(f"Failed login for '{username}'")
            raise InvalidCredentials()
        return UserRead.model_validate(user)
