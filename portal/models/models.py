from portal.config import Base
from sqlalchemy import Column, Integer, String, JSON, DateTime, ForeignKey, Text, Boolean
from sqlalchemy.orm import relationship
from datetime import datetime


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default="student")  # student|parent|teacher|admin
    full_name = Column(String, nullable=False, default="")
    first_time_login = Column(Boolean, nullable=False, default=True)
    preferences = Column(JSON, nullable=True)  # {"interests": [...], "style": str}
    aspiration = Column(Text, nullable=True)  # parents only
    student_id = Column(Integer, ForeignKey("users.id"), nullable=True)  # parents only: linked student
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    student = relationship("User", remote_side=[id], foreign_keys=[student_id], uselist=False)
    progress = relationship(
        "LearnerProgressRecord",
        backref="learner",
        uselist=False,
        cascade="all, delete-orphan",
    )


class LearnerProgressRecord(Base):
    """One document per learner; see learning.models.LearnerProgress for the shape."""

    __tablename__ = "learner_progress"
    learner_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    total_xp = Column(Integer, default=0, nullable=False)
    current_streak = Column(Integer, default=0, nullable=False)
    completed_modules = Column(JSON, nullable=False, default=list)  # list[str]
    history = Column(JSON, nullable=False, default=list)  # [{"day": "YYYY-MM-DD", "xp_earned": int}]
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class LearningPath(Base):
    __tablename__ = "learning_paths"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=False)
    interest = Column(String, index=True, nullable=False)
    order_index = Column(Integer, nullable=False, default=0)

    modules = relationship(
        "CatalogModule",
        backref="path",
        cascade="all, delete-orphan",
        order_by="CatalogModule.order_index",
    )


class CatalogModule(Base):
    __tablename__ = "catalog_modules"
    module_id = Column(String, primary_key=True, index=True)  # e.g. "tech-101"
    path_id = Column(Integer, ForeignKey("learning_paths.id"), index=True, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    xp_value = Column(Integer, nullable=False, default=20)
    order_index = Column(Integer, nullable=False, default=0)


class Announcement(Base):
    __tablename__ = "announcements"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    date = Column(DateTime, default=datetime.utcnow, nullable=False)
