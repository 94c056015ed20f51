from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

AnalysisStatus = Literal["ready", "missing_skills", "beginner_roadmap"]


class SkillAnalysisRequest(BaseModel):
    role: str = Field(default="", max_length=200)
    company: str = Field(default="", max_length=200)
    skills: list[str] = Field(default_factory=list, max_length=100)


class MissingSkill(BaseModel):
    skill: str
    video: str


class SkillRoadmap(BaseModel):
    title: str
    skills: list[MissingSkill] = Field(default_factory=list)


class SkillAnalysisResponse(BaseModel):
    status: AnalysisStatus
    message: str | None = None
    missing_skills: list[MissingSkill] | None = None
    roadmaps: list[SkillRoadmap] | None = None


class SkillAnalysisError(BaseModel):
    error: str
    details: str
