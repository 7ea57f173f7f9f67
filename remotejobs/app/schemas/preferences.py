"""
Job-search preferences stored on the user.

Known keys mirror the client's search filters and are validated; anything else is kept
as-is so newer clients can store fields this server doesn't know about yet.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict


class Preferences(BaseModel):
    model_config = ConfigDict(extra="allow")

    location: Optional[Literal["any", "us", "europe", "worldwide"]] = None
    jobType: Optional[Literal["any", "full-time", "part-time", "contract", "freelance", "internship"]] = None
    experience: Optional[Literal["any", "intern", "entry", "mid", "senior"]] = None
    salaryType: Optional[Literal["any", "hourly", "monthly", "yearly"]] = None
    datePosted: Optional[Literal["any", "24h", "week", "month"]] = None
    categories: Optional[List[str]] = None
    emailAlerts: Optional[bool] = None


def preferences_to_dict(prefs: Preferences) -> dict:
    """Known keys that carry a value, plus every extra key, ready for the JSON column."""
    return prefs.model_dump(exclude_none=True)
