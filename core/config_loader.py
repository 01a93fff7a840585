import yaml
import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    url: str


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list = Field(default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"])


class JobMatcherConfig(BaseModel):
    """Periodic scan of newly posted jobs against student preferences."""
    enabled: bool = True
    interval_minutes: float = 10
    max_workers: int = 4  # Per-job notification writes run concurrently


class PreferenceReminderConfig(BaseModel):
    """Periodic nudge for students who have not filled in job preferences."""
    enabled: bool = True
    interval_hours: float = 3  # Also the per-student cooldown
    min_account_age_hours: float = 24
    send_email: bool = True
    max_email_workers: int = 4


class MatchingConfig(BaseModel):
    # Four criteria, so the score tops out at 4 * criterion_weight
    criterion_weight: int = Field(default=25, gt=0, le=25)
    match_threshold: int = Field(default=50, ge=0, le=100)


class SchedulersConfig(BaseModel):
    # Start both schedulers inside the web process (single-process deployment)
    run_in_web: bool = False


class NotificationConfig(BaseModel):
    """
    Configuration for notifications.

    SMTP credentials come from the environment (SMTP_SERVER, SMTP_PORT,
    SMTP_USERNAME, SMTP_PASSWORD, FROM_EMAIL), never from this file.
    """
    email_enabled: bool = True

    # Base URL for links in emails
    base_url: str = "http://localhost:5173"


class AppConfig(BaseModel):
    database: DatabaseConfig
    web: WebConfig = Field(default_factory=WebConfig)
    job_matcher: JobMatcherConfig = Field(default_factory=JobMatcherConfig)
    preference_reminder: PreferenceReminderConfig = Field(default_factory=PreferenceReminderConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    schedulers: SchedulersConfig = Field(default_factory=SchedulersConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    if data.get(name) is None:
        data[name] = {}
    return data[name]


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try absolute or adjusted path
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        _section(data, 'database')['url'] = env_db_url

    env_web_host = os.environ.get("WEB_HOST")
    if env_web_host:
        _section(data, 'web')['host'] = env_web_host

    env_web_port = os.environ.get("WEB_PORT")
    if env_web_port:
        _section(data, 'web')['port'] = int(env_web_port)

    env_matcher_interval = os.environ.get("JOB_MATCHER_INTERVAL_MINUTES")
    if env_matcher_interval:
        _section(data, 'job_matcher')['interval_minutes'] = float(env_matcher_interval)

    env_reminder_interval = os.environ.get("REMINDER_INTERVAL_HOURS")
    if env_reminder_interval:
        _section(data, 'preference_reminder')['interval_hours'] = float(env_reminder_interval)

    return AppConfig(**data)
