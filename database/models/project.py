from sqlalchemy import Column, Integer, Text, DateTime, JSON, UniqueConstraint, Index, func

from .base import Base


class ProjectRecord(Base):
    """
    One JSON document of a project, keyed by module ("kyc", "fyi", ...).

    A project is the set of records sharing a slug; there is no separate
    project table.
    """
    __tablename__ = 'project_record'

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(Text, nullable=False)
    module = Column(Text, nullable=False)
    data = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint('slug', 'module', name='uq_project_record_slug_module'),
        Index('idx_project_record_slug', 'slug'),
    )
