from collections.abc import Sequence

from soapnote.schemas import SpeechSegment


def format_line(segment: SpeechSegment) -> str:
    return f"[{segment.timestamp}] {segment.speaker}: {segment.text}"


def format_transcript(segments: Sequence[SpeechSegment]) -> str:
    """Render segments one per line, in conversation order.

    Segment text is kept verbatim. Callers reject empty transcripts before
    getting here.
    """

    return "\n".join(format_line(segment) for segment in segments)
