from enum import Enum
from typing import Optional, List

from pydantic import BaseModel, Field, field_validator


class JobType(str, Enum):
    JOB = "job"
    ADMIT_CARD = "admit-card"
    RESULT = "result"
    ANSWER_KEY = "answer-key"
    ADMISSION = "admission"


class VacancyEntry(BaseModel):
    postName: str
    totalPost: str
    eligibility: str = ""


class FeeEntry(BaseModel):
    category: str
    fee: str


class DateEntry(BaseModel):
    label: str
    date: str


class AgeEntry(BaseModel):
    category: str
    minAge: str
    maxAge: str


class PhysicalEntry(BaseModel):
    criteria: str
    male: str = "NA"
    female: str = "NA"


class ParsedJob(BaseModel):
    title: str
    department: str
    type: JobType = JobType.JOB
    shortInfo: str
    qualification: Optional[str] = None
    state: Optional[str] = None
    vacancyDetails: List[VacancyEntry] = Field(default_factory=list)
    applicationFee: List[FeeEntry] = Field(default_factory=list)
    importantDates: List[DateEntry] = Field(default_factory=list)
    ageLimit: List[AgeEntry] = Field(default_factory=list)
    eligibilityDetails: Optional[str] = None
    selectionProcess: List[str] = Field(default_factory=list)
    physicalEligibility: List[PhysicalEntry] = Field(default_factory=list)
    applyOnlineUrl: Optional[str] = None
    admitCardUrl: Optional[str] = None
    resultUrl: Optional[str] = None
    answerKeyUrl: Optional[str] = None
    notificationUrl: Optional[str] = None
    officialWebsiteUrl: Optional[str] = None

    @field_validator(
        "qualification",
        "state",
        "eligibilityDetails",
        "applyOnlineUrl",
        "admitCardUrl",
        "resultUrl",
        "answerKeyUrl",
        "notificationUrl",
        "officialWebsiteUrl",
    )
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        # optional text is either absent or non-empty, never ""
        if value is None:
            return None
        value = value.strip()
        return value or None

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

