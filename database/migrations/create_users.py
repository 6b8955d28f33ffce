from sqlalchemy import Column, String, Integer
from sqlalchemy.orm import declarative_base

Base = declarative_base()

class UserRecord(Base):

    __tablename__ = "users"

    id         = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name       = Column(String(255), nullable=False)
    email      = Column(String(255), nullable=False)
    created_at = Column(String(32), nullable=False)
