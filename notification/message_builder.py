import html
from typing import List, Optional
from pydantic import BaseModel

JOB_MATCH_TYPE = 'job_match'
PREFERENCE_REMINDER_TYPE = 'job_preference_reminder'

JOB_MATCH_TITLE = '🎯 New Job Matches Your Interests!'
PREFERENCE_REMINDER_TITLE = '⚙️ Complete Your Job Preferences'
PREFERENCE_REMINDER_MESSAGE = (
    'Help us match you with the perfect job opportunities! '
    'Fill in your job preferences to start receiving personalized job recommendations. '
    'Go to "Job Interests" in your dashboard.'
)
PREFERENCE_REMINDER_ACTION_URL = '/dashboard/job-interests'
PREFERENCE_REMINDER_EMAIL_SUBJECT = 'Complete Your Job Preferences - Get Personalized Job Matches'


class NotificationContent(BaseModel):
    """An in-app notification ready to be stored for one user."""
    user_id: str
    type: str
    title: str
    message: str
    related_id: Optional[str] = None
    action_url: Optional[str] = None


class EmailContent(BaseModel):
    subject: str
    text: str
    html: str


class NotificationMessageBuilder:
    @staticmethod
    def job_match_message(job_title: str, company: str, reasons: List[str]) -> str:
        return (
            f"{job_title} at {company} matches your job interests based on your "
            f"{', '.join(reasons)} preferences. Click to view!"
        )

    @staticmethod
    def build_job_match(
        student_id: str,
        job_id: str,
        job_title: str,
        company: str,
        reasons: List[str]
    ) -> NotificationContent:
        return NotificationContent(
            user_id=student_id,
            type=JOB_MATCH_TYPE,
            title=JOB_MATCH_TITLE,
            message=NotificationMessageBuilder.job_match_message(
                job_title or "Unknown Position", company or "Unknown Company", reasons
            ),
            related_id=job_id,
        )

    @staticmethod
    def build_preference_reminder(student_id: str) -> NotificationContent:
        return NotificationContent(
            user_id=student_id,
            type=PREFERENCE_REMINDER_TYPE,
            title=PREFERENCE_REMINDER_TITLE,
            message=PREFERENCE_REMINDER_MESSAGE,
            action_url=PREFERENCE_REMINDER_ACTION_URL,
        )

    @staticmethod
    def build_reminder_email(name: Optional[str], base_url: str) -> EmailContent:
        """Reminder email with a link to the job interests page."""
        display_name = name or "there"
        link = f"{base_url.rstrip('/')}{PREFERENCE_REMINDER_ACTION_URL}"

        text = (
            f"Hi {display_name},\n\n"
            "You haven't set your job preferences yet. Tell us which industries, "
            "skills and work types interest you and we'll notify you as soon as a "
            "matching job is posted.\n\n"
            f"Set your preferences: {link}\n"
        )

        safe_name = html.escape(display_name)
        safe_link = html.escape(link, quote=True)
        html_body = f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <style>
        body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
        .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
        .button {{ display: inline-block; padding: 10px 20px; background: #4f46e5; color: #fff; text-decoration: none; border-radius: 6px; }}
        .footer {{ font-size: 12px; color: #888; margin-top: 24px; }}
    </style>
</head>
<body>
    <div class="container">
        <h2>{html.escape(PREFERENCE_REMINDER_TITLE)}</h2>
        <p>Hi {safe_name},</p>
        <p>You haven't set your job preferences yet. Tell us which industries, skills
        and work types interest you and we'll notify you as soon as a matching job is posted.</p>
        <p><a class="button" href="{safe_link}">Set My Job Preferences</a></p>
        <p class="footer">You are receiving this because you have a student account without job preferences.</p>
    </div>
</body>
</html>"""

        return EmailContent(subject=PREFERENCE_REMINDER_EMAIL_SUBJECT, text=text, html=html_body)

