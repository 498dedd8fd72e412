from sqlalchemy import Column, String, Integer, CheckConstraint

from constants import DatabaseConfig
from database import Base


class User(Base):
    """
    A persisted user account.

    The id is generated by the store on insert and never supplied by callers.
    The password column never leaves the persistence layer: the API only ever
    returns the UserRecord projection (see dtos.response.user_response).
    """
    __tablename__ = DatabaseConfig.USERS_TABLE

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, nullable=False)
    password = Column(String, nullable=False)
    email = Column(String, nullable=False)

    __table_args__ = (
        CheckConstraint("username != ''", name='ck_users_username_not_empty'),
        CheckConstraint("password != ''", name='ck_users_password_not_empty'),
        CheckConstraint("email != ''", name='ck_users_email_not_empty'),
    )

    def __repr__(self):
        return f"<User id={self.id} username={self.username!r}>"
