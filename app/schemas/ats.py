from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

KEYWORDS_MAX = 40
HARD_SKILLS_MAX = 20
JOB_TITLE_MAX = 15
EDUCATION_MAX = 10
FORMAT_MAX = 10
SOFT_SKILLS_MAX = 5

TitleRelevance = Literal["high", "medium", "low"]
EducationStatus = Literal["exceeds", "meets", "partial", "missing"]
ScoreRating = Literal["strong", "fair", "weak"]


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _coerce_text_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    return [_coerce_text(item) for item in value if item is not None]


def _coerce_record_list(value: Any) -> list[Any]:
    if value is None:
        return []
    return [item for item in value if item is not None]


# Inputs: produced upstream by the resume parser. Missing or null fields become
# empty values so scoring stays total.


class ExperienceEntry(BaseModel):
    title: str = ""
    company: str = ""
    bullets: list[str] = Field(default_factory=list)

    @field_validator("title", "company", mode="before")
    @classmethod
    def _validate_text(cls, value: Any) -> str:
        return _coerce_text(value)

    @field_validator("bullets", mode="before")
    @classmethod
    def _validate_bullets(cls, value: Any) -> list[str]:
        return _coerce_text_list(value)


class EducationEntry(BaseModel):
    degree: str = ""
    field: str | None = None
    institution: str = ""

    @field_validator("degree", "institution", mode="before")
    @classmethod
    def _validate_text(cls, value: Any) -> str:
        return _coerce_text(value)

    @field_validator("field", mode="before")
    @classmethod
    def _validate_field(cls, value: Any) -> str | None:
        if value is None:
            return None
        return _coerce_text(value) or None


class ResumeContent(BaseModel):
    summary: str = ""
    experience: list[ExperienceEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)

    @field_validator("summary", mode="before")
    @classmethod
    def _validate_summary(cls, value: Any) -> str:
        return _coerce_text(value)

    @field_validator("skills", mode="before")
    @classmethod
    def _validate_skills(cls, value: Any) -> list[str]:
        return _coerce_text_list(value)

    @field_validator("experience", "education", mode="before")
    @classmethod
    def _validate_records(cls, value: Any) -> list[Any]:
        return _coerce_record_list(value)


# Outputs: created once per scoring call and never mutated.


class _DimensionScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0)


class KeywordsScore(_DimensionScore):
    max: Literal[40] = KEYWORDS_MAX
    matches: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)


class HardSkillsScore(_DimensionScore):
    max: Literal[20] = HARD_SKILLS_MAX
    matches: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)


class JobTitleScore(_DimensionScore):
    max: Literal[15] = JOB_TITLE_MAX
    relevance: TitleRelevance
    details: str


class EducationScore(_DimensionScore):
    max: Literal[10] = EDUCATION_MAX
    status: EducationStatus
    details: str


class FormatScore(_DimensionScore):
    max: Literal[10] = FORMAT_MAX
    issues: list[str] = Field(default_factory=list)


class SoftSkillsScore(_DimensionScore):
    max: Literal[5] = SOFT_SKILLS_MAX
    matches: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)


class ATSScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    keywords: KeywordsScore
    hard_skills: HardSkillsScore
    job_title: JobTitleScore
    education: EducationScore
    format: FormatScore
    soft_skills: SoftSkillsScore

    def dimensions(self) -> list[_DimensionScore]:
        return [
            self.keywords,
            self.hard_skills,
            self.job_title,
            self.education,
            self.format,
            self.soft_skills,
        ]


class ATSScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall: int = Field(ge=0, le=100)
    rating: ScoreRating
    breakdown: ATSScoreBreakdown
    suggestions: list[str] = Field(default_factory=list, max_length=5)


class ATSScoreRequest(BaseModel):
    resume: ResumeContent | None = None
    job_description: str = ""
    job_title: str = ""

    @field_validator("job_description", "job_title", mode="before")
    @classmethod
    def _validate_text(cls, value: Any) -> str:
        return _coerce_text(value)
