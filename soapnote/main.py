import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException

from soapnote.errors import (
    EmptyGenerationError,
    EmptyTranscriptError,
    GenerationInProgressError,
    UpstreamError,
)
from soapnote.schemas import (
    QuickSummaryRequest,
    QuickSummaryResponse,
    SOAPNote,
    SOAPRequest,
    StatusResponse,
)
from soapnote.summary import MedicalSummaryGenerator

logger = logging.getLogger(__name__)

app = FastAPI(title="SOAP Note Generator")


@lru_cache(maxsize=1)
def get_summary_generator() -> MedicalSummaryGenerator:
    # One generator per process, so the process is one single-flight domain.
    return MedicalSummaryGenerator()


@app.post("/api/soap", response_model=SOAPNote)
async def generate_soap(
    req: SOAPRequest,
    generator: MedicalSummaryGenerator = Depends(get_summary_generator),
):
    try:
        return await generator.generate_summary(req.transcript, req.patient)
    except GenerationInProgressError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except EmptyTranscriptError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except (UpstreamError, EmptyGenerationError) as exc:
        logger.warning("SOAP generation failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc))


@app.post("/api/quick-summary", response_model=QuickSummaryResponse)
async def quick_summary(
    req: QuickSummaryRequest,
    generator: MedicalSummaryGenerator = Depends(get_summary_generator),
):
    try:
        text = await generator.generate_quick_summary(req.transcript)
    except EmptyTranscriptError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except (UpstreamError, EmptyGenerationError) as exc:
        logger.warning("Quick summary failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc))
    return QuickSummaryResponse(summary=text)


@app.get("/api/status", response_model=StatusResponse)
async def status(generator: MedicalSummaryGenerator = Depends(get_summary_generator)):
    return StatusResponse(generating=generator.is_generating())
