"""Canned receptionist replies for the SmileCare chat widget."""

from smilecare.config import CLINIC_NAME
from smilecare.models import Appointment

GREETING_TEMPLATE = (
    "Hello! Welcome to {clinic_name}. I'm your AI receptionist assistant. "
    "How can I help you today? Would you like to book an appointment, check "
    "availability, or do you have questions about our services?"
)

SERVICES = (
    "We offer a comprehensive range of dental services including:\n\n"
    "🦷 General Dentistry: Checkups, cleanings, fillings\n"
    "🏥 Restorative: Root canals, crowns, bridges\n"
    "✨ Cosmetic: Teeth whitening, veneers\n"
    "🦴 Surgical: Extractions, implants\n"
    "😁 Orthodontics: Braces, Invisalign\n\n"
    "Would you like to book an appointment for any of these services?"
)

HOURS = (
    "Our office hours are:\n\n"
    "📅 Monday - Friday: 9:00 AM - 5:00 PM\n"
    "📅 Saturday: 9:00 AM - 2:00 PM\n"
    "📅 Sunday: Closed\n\n"
    "For emergencies after hours, please call (555) 123-9999.\n\n"
    "Would you like to schedule an appointment?"
)

INSURANCE = (
    "Yes, we accept most major dental insurance plans including:\n\n"
    "💳 Delta Dental\n"
    "💳 Cigna\n"
    "💳 Aetna\n"
    "💳 MetLife\n"
    "💳 United Healthcare\n"
    "💳 And many others\n\n"
    "For specific coverage details, please call us at (555) 123-4567 or "
    "provide your insurance information when booking.\n\n"
    "Would you like to schedule an appointment?"
)

ASK_NAME = (
    "I'd be happy to help you book an appointment! Let's start with your "
    "full name. What's your name?"
)

ASK_PHONE_TEMPLATE = "Thank you, {name}! What's the best phone number to reach you at?"

ASK_EMAIL = "Great! And what's your email address?"

ASK_REASON = (
    "Perfect! What's the reason for your visit? (For example: routine "
    "cleaning, checkup, tooth pain, cosmetic consultation, etc.)"
)

ASK_DATE = (
    "Got it! What date works best for you? We're open Monday-Friday "
    "9 AM-5 PM, and Saturday 9 AM-2 PM."
)

ASK_TIME = (
    "What time would you prefer? We have morning (9 AM - 12 PM), afternoon "
    "(12 PM - 3 PM), and late afternoon (3 PM - 5 PM) slots available."
)

CONFIRMATION_TEMPLATE = (
    "Perfect! Let me confirm your appointment details:\n\n"
    "👤 Name: {name}\n"
    "📞 Phone: {phone}\n"
    "✉️ Email: {email}\n"
    "📅 Date: {date}\n"
    "🕐 Time: {time}\n"
    "🦷 Reason: {reason}\n\n"
    "Your appointment request has been received! Our team will call you "
    "within 24 hours to confirm your appointment. Is there anything else I "
    "can help you with?"
)

MENU = (
    "I'm here to help! You can:\n\n"
    "📅 Book an appointment\n"
    "🕐 Check our office hours\n"
    "🦷 Learn about our services\n"
    "💳 Ask about insurance\n\n"
    "What would you like to do?"
)

APOLOGY = (
    "I apologize, but I'm having trouble processing your request. "
    "Please try again."
)


def greeting() -> str:
    """Opening line shown when the widget loads."""
    return GREETING_TEMPLATE.format(clinic_name=CLINIC_NAME)


def ask_phone(appointment: Appointment) -> str:
    return ASK_PHONE_TEMPLATE.format(name=appointment.name)


def confirmation(appointment: Appointment) -> str:
    """Summary of a fully collected appointment."""
    return CONFIRMATION_TEMPLATE.format(**appointment.model_dump())
