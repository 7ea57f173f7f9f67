"""
Remote job feed schemas - mirrors the fields the third-party API returns
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobPosting(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, str]] = None
    title: Optional[str] = ""
    company_name: Optional[str] = ""
    candidate_required_location: Optional[str] = ""
    job_type: Optional[str] = ""
    publication_date: Optional[str] = ""
    description: Optional[str] = ""
    salary: Optional[str] = None
    category: Optional[str] = ""
    url: Optional[str] = ""
    isNew: bool = False

    @field_validator(
        "title",
        "company_name",
        "candidate_required_location",
        "job_type",
        "publication_date",
        "description",
        "category",
        "url",
        mode="before",
    )
    @classmethod
    def null_to_empty(cls, value):
        # the feed sends null for fields it has no value for
        return "" if value is None else value


class JobsResponse(BaseModel):
    success: bool = True
    total: int
    count: int
    jobs: List[JobPosting] = Field(default_factory=list)
