from soapnote.parser import extract_section, parse_soap_note
from soapnote.schemas import SOAPNote


def test_parse_well_formed_reply():
    note = parse_soap_note("SUBJECTIVE: A\nOBJECTIVE: B\nASSESSMENT: C\nPLAN: D")

    assert note == SOAPNote(subjective="A", objective="B", assessment="C", plan="D")


def test_parse_multiline_sections_are_trimmed():
    reply = (
        "SUBJECTIVE:\nHeadache for 3 days.\n\n"
        "OBJECTIVE:\nBP 120/80.\n\n"
        "ASSESSMENT:\nTension headache.\n\n"
        "PLAN:\nIbuprofen 400 mg PRN.\nFollow up in 2 weeks.\n"
    )

    note = parse_soap_note(reply)

    assert note.subjective == "Headache for 3 days."
    assert note.objective == "BP 120/80."
    assert note.assessment == "Tension headache."
    assert note.plan == "Ibuprofen 400 mg PRN.\nFollow up in 2 weeks."


def test_parse_labels_case_insensitively():
    note = parse_soap_note("subjective: a\nObjective: b\nassessment: c\nPlan: d")

    assert note == SOAPNote(subjective="a", objective="b", assessment="c", plan="d")


def test_parse_only_plan():
    note = parse_soap_note("PLAN: done")

    assert note == SOAPNote(subjective="", objective="", assessment="", plan="done")


def test_parse_without_labels_falls_back_to_subjective():
    note = parse_soap_note("patient seems fine")

    assert note == SOAPNote(subjective="patient seems fine", objective="", assessment="", plan="")


def test_fallback_keeps_reply_untrimmed():
    reply = "  free text reply \n"

    note = parse_soap_note(reply)

    assert note.subjective == reply
    assert note.objective == note.assessment == note.plan == ""


def test_labels_without_content_fall_back_to_whole_reply():
    reply = "SUBJECTIVE:\nOBJECTIVE:\nASSESSMENT:\nPLAN:"

    note = parse_soap_note(reply)

    assert note.subjective == reply
    assert note.plan == ""


def test_section_runs_to_next_label_in_order_only():
    note = parse_soap_note("SUBJECTIVE: cough\nASSESSMENT: bronchitis\nPLAN: rest")

    assert note.subjective == "cough\nASSESSMENT: bronchitis\nPLAN: rest"
    assert note.objective == ""
    assert note.assessment == "bronchitis"
    assert note.plan == "rest"


def test_plan_label_matches_first_occurrence_anywhere():
    reply = (
        "SUBJECTIVE: Patient wants to discuss the plan.\n"
        "OBJECTIVE: Afebrile.\n"
        "ASSESSMENT: Viral URI.\n"
        "PLAN: Fluids."
    )

    note = parse_soap_note(reply)

    assert note.subjective == "Patient wants to discuss the plan."
    assert note.objective == "Afebrile."
    assert note.assessment == "Viral URI."
    assert note.plan == ".\nOBJECTIVE: Afebrile.\nASSESSMENT: Viral URI.\nPLAN: Fluids."


def test_extract_section_missing_label_returns_empty():
    assert extract_section("OBJECTIVE: stable", "assessment") == ""
    assert extract_section("OBJECTIVE: stable", "objective") == "stable"
