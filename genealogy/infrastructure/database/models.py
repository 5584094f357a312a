"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Account(Base):
    __tablename__ = "accounts"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), default="member")
    real_name = Column(String(100))
    is_active = Column(Boolean, default=True)
    email = Column(String(100), unique=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    last_login_at = Column(DateTime(timezone=True))


class Tree(Base):
    __tablename__ = "trees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), unique=True, nullable=False, index=True)
    title = Column(String(255), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    individuals = relationship("Individual", back_populates="tree", cascade="all, delete-orphan")


class Individual(Base):
    __tablename__ = "individuals"
    __table_args__ = (UniqueConstraint("tree_id", "xref", name="uq_individuals_tree_xref"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    tree_id = Column(Integer, ForeignKey("trees.id", ondelete="CASCADE"), nullable=False, index=True)
    xref = Column(String(20), nullable=False)
    full_name = Column(String(255), nullable=False, default="")
    sex = Column(String(1), nullable=False, default="U")
    is_private = Column(Boolean, default=False)
    is_locked = Column(Boolean, default=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    tree = relationship("Tree", back_populates="individuals")
