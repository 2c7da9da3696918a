import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from soapnote.schemas import PatientInfo, SOAPNote, SpeechSegment
from soapnote.summary import MedicalSummaryGenerator


def load_transcript(path: Path) -> tuple[list[SpeechSegment], Optional[PatientInfo]]:
    """Read a transcript file.

    The file holds either a JSON list of segments or an object with a
    ``transcript`` list and an optional ``patient`` object.
    """

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SystemExit(f"Cannot read transcript {str(path)!r}: {exc}") from exc

    patient_data = None
    if isinstance(data, dict):
        patient_data = data.get("patient")
        data = data.get("transcript", [])
    if not isinstance(data, list):
        raise SystemExit("Transcript must be a list of segments")

    try:
        segments = [SpeechSegment.model_validate(item) for item in data]
        patient = PatientInfo.model_validate(patient_data) if patient_data else None
    except ValidationError as exc:
        raise SystemExit(f"Invalid transcript: {exc}") from exc
    return segments, patient


def render_note(note: SOAPNote) -> str:
    return "\n\n".join(
        [
            f"SUBJECTIVE:\n{note.subjective}",
            f"OBJECTIVE:\n{note.objective}",
            f"ASSESSMENT:\n{note.assessment}",
            f"PLAN:\n{note.plan}",
        ]
    )


async def generate_soap(
    segments: list[SpeechSegment], patient: Optional[PatientInfo]
) -> None:
    try:
        generator = MedicalSummaryGenerator()
        note = await generator.generate_summary(segments, patient)
    except RuntimeError as exc:
        raise SystemExit(str(exc)) from exc
    print(render_note(note))


async def generate_quick(segments: list[SpeechSegment]) -> None:
    try:
        generator = MedicalSummaryGenerator()
        summary = await generator.generate_quick_summary(segments)
    except RuntimeError as exc:
        raise SystemExit(str(exc)) from exc
    print(summary)


def _merge_patient(
    patient: Optional[PatientInfo], name: Optional[str], mrn: Optional[str]
) -> Optional[PatientInfo]:
    if name is None and mrn is None:
        return patient
    base = patient or PatientInfo()
    return PatientInfo(
        name=name if name is not None else base.name,
        mrn=mrn if mrn is not None else base.mrn,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate notes from a conversation transcript")
    parser.add_argument("--verbose", action="store_true", help="Log request details")
    subparsers = parser.add_subparsers(dest="command", required=True)

    soap_parser = subparsers.add_parser("soap", help="Generate a SOAP note")
    soap_parser.add_argument("transcript", type=Path, help="Path to a JSON transcript")
    soap_parser.add_argument("--name", help="Patient name")
    soap_parser.add_argument("--mrn", help="Patient medical record number")

    quick_parser = subparsers.add_parser("quick", help="Generate a 2-3 sentence summary")
    quick_parser.add_argument("transcript", type=Path, help="Path to a JSON transcript")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    segments, patient = load_transcript(args.transcript)
    if args.command == "soap":
        patient = _merge_patient(patient, args.name, args.mrn)
        asyncio.run(generate_soap(segments, patient))
    elif args.command == "quick":
        asyncio.run(generate_quick(segments))


if __name__ == "__main__":
    main()
