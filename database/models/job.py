from sqlalchemy import Column, String, Text, JSON, TIMESTAMP, Index

from core.utils import new_id, utc_now
from .base import Base


class JobPost(Base):
    """
    A job posted by a company. Attribute lists (industries, skills,
    work_type) hold free-text terms chosen by the company.
    """
    __tablename__ = 'job_post'

    id = Column(String(36), primary_key=True, default=new_id)
    company_id = Column(String(36), nullable=True, index=True)

    title = Column(Text, nullable=False)
    company = Column(Text, nullable=False)

    industries = Column(JSON, nullable=False, default=list)
    skills = Column(JSON, nullable=False, default=list)
    work_type = Column(JSON, nullable=False, default=list)
    location = Column(Text)

    status = Column(String(16), nullable=False, default='active')  # active, closed
    posted_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now)

    __table_args__ = (
        Index('idx_job_post_status_posted', 'status', 'posted_at'),
    )

    def to_attributes(self) -> dict:
        return {
            'industries': list(self.industries or []),
            'skills': list(self.skills or []),
            'work_type': list(self.work_type or []),
            'location': self.location,
        }
