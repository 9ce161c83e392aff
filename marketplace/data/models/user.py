from sqlalchemy import Column, Integer, String
from marketplace.data.database import Base

class UserModel(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False)  # plaintext
    role = Column(String, nullable=False, default="user", server_default="user")  # user, admin
