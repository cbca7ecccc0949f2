"""
Rule-based dialogue responder.

Input is lowercased and checked against an ordered tuple of intent rules.
The first rule with any keyword contained in the text produces the reply;
when none matches, the fallback text is returned.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from ...config import ClinicConfig
from ...core.enums import Intent
from ...core.models.doctor import Doctor
from ...utils.logging import get_logger

logger = get_logger("shifa.responder")

Render = Callable[[Sequence[Doctor], ClinicConfig], str]


@dataclass(frozen=True)
class IntentRule:
    """Keywords that trigger an intent and the template that answers it."""

    intent: Intent
    keywords: Tuple[str, ...]
    render: Render

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


def _emergency(doctors: Sequence[Doctor], clinic: ClinicConfig) -> str:
    return (
        "🚨 For medical emergencies, please:\n"
        "\n"
        f"1. Call emergency services: {clinic.emergency_numbers}\n"
        "2. Visit our emergency department immediately\n"
        f"3. Contact our 24/7 hotline: {clinic.main_line}\n"
        "\n"
        "If this is not life-threatening, I can help you find appropriate care. "
        "What symptoms are you experiencing?"
    )


def _appointment(doctors: Sequence[Doctor], clinic: ClinicConfig) -> str:
    return (
        "📅 I'd be happy to help you book an appointment!\n"
        "\n"
        "You can:\n"
        "• Browse available doctors by specialty\n"
        "• Check doctor availability and ratings\n"
        "• Book instantly with confirmation\n"
        "\n"
        "Would you like me to show you our doctor directory? "
        "What type of specialist are you looking for?"
    )


def _doctor(doctors: Sequence[Doctor], clinic: ClinicConfig) -> str:
    available = sum(1 for doctor in doctors if doctor.is_available())
    lines = "\n".join(
        f"• {doctor.name} - {doctor.specialization} ({doctor.rating:g}⭐)"
        for doctor in doctors[:3]
    )
    return (
        f"👨‍⚕️ We have {len(doctors)} expert doctors across various specializations:\n"
        "\n"
        f"{lines}\n"
        "\n"
        f"{available} doctors are currently available for appointments. "
        "Would you like to see the full directory or search for a specific specialty?"
    )


def _symptom(doctors: Sequence[Doctor], clinic: ClinicConfig) -> str:
    return (
        "🩺 I understand you're experiencing symptoms. While I can provide general "
        "information, it's important to consult with a healthcare professional for "
        "proper diagnosis.\n"
        "\n"
        "Based on your symptoms, you may want to consider:\n"
        "• Booking a consultation with a general physician\n"
        "• If severe: Visit our emergency department\n"
        "• For follow-up: Schedule with your regular doctor\n"
        "\n"
        "Would you like me to help you book an appointment with one of our doctors?"
    )


def _hospital(doctors: Sequence[Doctor], clinic: ClinicConfig) -> str:
    departments = "\n".join(f"• {name}" for name in clinic.departments)
    return (
        f"🏥 {clinic.name} Information:\n"
        "\n"
        f"📍 Location: {clinic.location}\n"
        f"🕒 Operating Hours: {clinic.hours}\n"
        f"📞 Main Line: {clinic.main_line}\n"
        f"🆘 Emergency: {clinic.emergency_numbers}\n"
        "\n"
        "Departments:\n"
        f"{departments}\n"
        "• And many more...\n"
        "\n"
        "Do you need directions or information about a specific department?"
    )


def _medication(doctors: Sequence[Doctor], clinic: ClinicConfig) -> str:
    return (
        "💊 For medication-related queries:\n"
        "\n"
        "⚠️ Important: Never stop or change medications without consulting your doctor.\n"
        "\n"
        "I can help you:\n"
        "• Find information about your prescribed medications\n"
        "• Set up appointment reminders\n"
        "• Connect you with your prescribing physician\n"
        "\n"
        "For specific medication questions, please consult with your doctor or our "
        "pharmacy team. Would you like me to help you schedule a consultation?"
    )


def _greeting(doctors: Sequence[Doctor], clinic: ClinicConfig) -> str:
    return (
        "Hello! I'm here to assist you with your healthcare needs. "
        "How can I help you today?\n"
        "\n"
        "Popular options:\n"
        "• Book an appointment\n"
        "• Find a doctor\n"
        "• Hospital information\n"
        "• Health questions"
    )


FALLBACK_RESPONSE = (
    "I'm here to help with your healthcare needs. I can assist you with:\n"
    "\n"
    "🩺 Medical consultations and appointments\n"
    "🏥 Hospital information and services\n"
    "👨‍⚕️ Finding the right specialist\n"
    "🚨 Emergency guidance\n"
    "💊 General health information\n"
    "\n"
    "Please let me know what specific information you're looking for, "
    "or feel free to ask any health-related question!"
)


def build_rules() -> Tuple[IntentRule, ...]:
    """Get the default rules, highest priority first."""
    return (
        IntentRule(Intent.EMERGENCY, ("emergency", "urgent", "help"), _emergency),
        IntentRule(Intent.APPOINTMENT, ("appointment", "book", "schedule"), _appointment),
        IntentRule(Intent.DOCTOR, ("doctor", "specialist"), _doctor),
        IntentRule(Intent.SYMPTOM, ("pain", "fever", "sick", "headache", "cough"), _symptom),
        IntentRule(Intent.HOSPITAL, ("hospital", "location", "address"), _hospital),
        IntentRule(Intent.MEDICATION, ("medication", "medicine", "prescription"), _medication),
        IntentRule(Intent.GREETING, ("hello", "hi", "hey"), _greeting),
    )


class DialogueResponder:
    """Maps free text and a doctor snapshot to a canned reply."""

    def __init__(
        self,
        rules: Optional[Sequence[IntentRule]] = None,
        clinic: Optional[ClinicConfig] = None,
        fallback: str = FALLBACK_RESPONSE,
    ):
        self.rules = tuple(rules) if rules is not None else build_rules()
        self.clinic = clinic or ClinicConfig()
        self.fallback = fallback

    @staticmethod
    def normalize(text: Optional[str]) -> str:
        if not isinstance(text, str):
            return ""
        return text.lower()

    def match(self, text: Optional[str]) -> Optional[IntentRule]:
        """Get the first rule matching the text, or None."""
        normalized = self.normalize(text)
        for rule in self.rules:
            if rule.matches(normalized):
                return rule
        return None

    def classify(self, text: Optional[str]) -> Intent:
        rule = self.match(text)
        return rule.intent if rule else Intent.FALLBACK

    def respond(self, text: Optional[str], doctors: Sequence[Doctor] = ()) -> str:
        """Get the reply for the text; never raises."""
        rule = self.match(text)
        if rule is None:
            return self.fallback
        try:
            return rule.render(list(doctors or ()), self.clinic)
        except Exception:
            logger.exception(f"template for {rule.intent.value} failed, using fallback")
            return self.fallback


_default_responder = DialogueResponder()


def respond(text: Optional[str], doctors: Sequence[Doctor] = ()) -> str:
    """Reply with the default rules and clinic details."""
    return _default_responder.respond(text, doctors)
