from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SpeechSegment(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: str
    speaker: str
    text: str


class PatientInfo(BaseModel):
    name: Optional[str] = None
    mrn: Optional[str] = None


class SOAPNote(BaseModel):
    subjective: str = ""
    objective: str = ""
    assessment: str = ""
    plan: str = ""


class SOAPRequest(BaseModel):
    transcript: list[SpeechSegment] = Field(..., min_length=1)
    patient: Optional[PatientInfo] = None


class QuickSummaryRequest(BaseModel):
    transcript: list[SpeechSegment] = Field(..., min_length=1)


class QuickSummaryResponse(BaseModel):
    summary: str


class StatusResponse(BaseModel):
    generating: bool
