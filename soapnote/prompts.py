from datetime import date
from typing import Optional

from soapnote.schemas import PatientInfo

NOT_PROVIDED = "Not provided"
NOT_DOCUMENTED = "Not documented in this visit"

SECTION_LABELS = ("SUBJECTIVE", "OBJECTIVE", "ASSESSMENT", "PLAN")

SOAP_PROMPT = """You are a medical documentation assistant. Based on the following doctor-patient conversation, generate a comprehensive SOAP note (Subjective, Objective, Assessment, Plan) in professional medical format.

**Patient Information:**
- Name: {name}
- MRN: {mrn}
- Date: {visit_date}

**Conversation Transcript:**
{conversation}

**Instructions:**
1. Extract relevant medical information from the conversation
2. Organize into SOAP format:
   - **SUBJECTIVE**: Patient's symptoms, complaints, history in their own words
   - **OBJECTIVE**: Observable findings, vital signs mentioned, physical exam findings
   - **ASSESSMENT**: Clinical impression, diagnosis, problems identified
   - **PLAN**: Treatment plan, follow-up, prescriptions, referrals

3. Use professional medical terminology
4. Be concise but comprehensive
5. Include only information explicitly mentioned in the conversation
6. If a section has no relevant information, write "{not_documented}"

**Format your response exactly as:**

SUBJECTIVE:
[Your subjective findings here]

OBJECTIVE:
[Your objective findings here]

ASSESSMENT:
[Your assessment here]

PLAN:
[Your plan here]"""

QUICK_SUMMARY_PROMPT = """Summarize this doctor-patient conversation in 2-3 sentences, focusing on the chief complaint and main points:

{conversation}

Provide a brief, professional medical summary."""


def format_visit_date(day: date) -> str:
    # Locale's short date form, e.g. 10/19/26 under the C locale.
    return day.strftime("%x")


def build_soap_prompt(
    conversation_text: str,
    patient_info: Optional[PatientInfo] = None,
    today: Optional[date] = None,
) -> str:
    patient = patient_info or PatientInfo()
    return SOAP_PROMPT.format(
        name=patient.name or NOT_PROVIDED,
        mrn=patient.mrn or NOT_PROVIDED,
        visit_date=format_visit_date(today or date.today()),
        conversation=conversation_text,
        not_documented=NOT_DOCUMENTED,
    )


def build_quick_summary_prompt(conversation_text: str) -> str:
    return QUICK_SUMMARY_PROMPT.format(conversation=conversation_text)
