# marketplace/data/seed.py
from sqlalchemy.orm import Session

from marketplace.data.models.user import UserModel
from marketplace.repos.user_repo import UserRepo
from marketplace.utils.settings import ADMIN_USERNAME, ADMIN_PASSWORD
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


def seed_admin(db: Session) -> bool:
    repo = UserRepo(db)
    # not forcing: only seed if absent
    if repo.get_by_username(ADMIN_USERNAME):
        return False

    repo.create_user(UserModel(username=ADMIN_USERNAME, password=ADMIN_PASSWORD, role="admin"))
    logger.info(f"Seeded admin account '{ADMIN_USERNAME}'")
    return True
