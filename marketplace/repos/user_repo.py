from sqlalchemy import select
from sqlalchemy.orm import Session
from marketplace.data.models.user import UserModel

class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_by_username(self, username: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.username == username)
        ).scalar_one_or_none()

    def find_by_credentials(self, username: str, password: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(
                UserModel.username == username,
                UserModel.password == password,
            )
        ).scalar_one_or_none()

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def rollback(self):
        self.db.rollback()
