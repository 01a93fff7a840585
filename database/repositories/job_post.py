import logging
from typing import List, Optional, Dict, Any
from datetime import datetime

from sqlalchemy import select

from database.models import JobPost
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class JobPostRepository(BaseRepository):
    def get_by_id(self, job_post_id: str) -> Optional[JobPost]:
        return self.db.get(JobPost, job_post_id)

    def get_active_posted_since(self, since: datetime) -> List[JobPost]:
        """Active jobs posted at or after the watermark, oldest first."""
        stmt = (
            select(JobPost)
            .where(JobPost.status == 'active', JobPost.posted_at >= since)
            .order_by(JobPost.posted_at)
        )
        return list(self.db.execute(stmt).scalars().all())

    def create_job_post(self, job_data: Dict[str, Any]) -> JobPost:
        job_post = JobPost(
            company_id=job_data.get('company_id'),
            title=job_data['title'],
            company=job_data['company'],
            industries=list(job_data.get('industries') or []),
            skills=list(job_data.get('skills') or []),
            work_type=list(job_data.get('work_type') or []),
            location=job_data.get('location'),
            status=job_data.get('status', 'active')
        )
        if job_data.get('posted_at') is not None:
            job_post.posted_at = job_data['posted_at']
        self.db.add(job_post)
        self.db.flush()
        return job_post
