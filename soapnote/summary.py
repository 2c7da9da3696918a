import logging
from collections.abc import Sequence
from typing import Optional, Protocol

from soapnote.errors import EmptyTranscriptError, GenerationInProgressError
from soapnote.gemini_client import GeminiClient
from soapnote.parser import parse_soap_note
from soapnote.prompts import build_quick_summary_prompt, build_soap_prompt
from soapnote.schemas import PatientInfo, SOAPNote, SpeechSegment
from soapnote.transcript import format_transcript

logger = logging.getLogger(__name__)


class GenerationClient(Protocol):
    async def generate(self, prompt: str) -> str: ...


class MedicalSummaryGenerator:
    """Turn conversation transcripts into SOAP notes.

    Each instance is its own single-flight domain: while one
    ``generate_summary`` call is running, further calls on the same instance
    are rejected rather than queued. ``generate_quick_summary`` does not take
    part in that guard.
    """

    def __init__(self, client: Optional[GenerationClient] = None) -> None:
        self._client = client or GeminiClient()
        self._generating = False

    async def generate_summary(
        self,
        transcript: Optional[Sequence[SpeechSegment]],
        patient_info: Optional[PatientInfo] = None,
    ) -> SOAPNote:
        if self._generating:
            raise GenerationInProgressError("Summary generation already in progress")
        if not transcript:
            raise EmptyTranscriptError("No transcript available to summarize")

        self._generating = True
        try:
            conversation_text = format_transcript(transcript)
            prompt = build_soap_prompt(conversation_text, patient_info)
            logger.info("Generating SOAP note for %d transcript segments", len(transcript))
            reply = await self._client.generate(prompt)
            return parse_soap_note(reply)
        finally:
            self._generating = False

    async def generate_quick_summary(
        self, transcript: Optional[Sequence[SpeechSegment]]
    ) -> str:
        if not transcript:
            raise EmptyTranscriptError("No transcript available to summarize")

        conversation_text = format_transcript(transcript)
        prompt = build_quick_summary_prompt(conversation_text)
        logger.info("Generating quick summary for %d transcript segments", len(transcript))
        return await self._client.generate(prompt)

    def is_generating(self) -> bool:
        return self._generating
