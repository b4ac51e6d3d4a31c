"""
Availability option lists.
Static choices offered by the availability editor; the availability schemas validate against them
and GET /availability/options returns them so the frontend can render the pickers.
"""

TIMEZONES = [
    "UTC", "EST", "PST", "CST", "MST", "GMT",
    "CET", "EET", "JST", "IST", "AEST", "NZST",
]

CURRENCIES = ["USD", "EUR", "GBP", "CAD", "AUD", "JPY", "INR", "BRL", "CHF", "SEK"]

RESPONSE_TIMES = [
    {"value": "within-1-hour", "label": "Within 1 hour"},
    {"value": "within-4-hours", "label": "Within 4 hours"},
    {"value": "within-24-hours", "label": "Within 24 hours"},
    {"value": "within-2-days", "label": "Within 2 days"},
    {"value": "within-1-week", "label": "Within 1 week"},
]

AVAILABILITY_STATUSES = ["available", "busy", "away", "invisible"]

COMMUNICATION_METHODS = ["email", "phone", "video-call", "messaging", "in-person"]

PROJECT_TYPES = [
    "Web Design", "Mobile App", "Branding", "UI/UX", "Graphic Design", "Illustration",
    "Photography", "Video Production", "3D Modeling", "Animation", "Copywriting",
    "Marketing", "Development", "Consulting", "Training", "Research", "Writing",
    "Translation",
]

SKILLS = [
    "React", "Vue.js", "Angular", "Node.js", "Python", "JavaScript", "TypeScript",
    "Figma", "Adobe XD", "Sketch", "Photoshop", "Illustrator", "After Effects",
    "UI/UX Design", "Web Design", "Mobile Design", "Branding", "Logo Design",
    "Photography", "Videography", "3D Modeling", "Animation", "Copywriting",
    "Marketing", "SEO", "Content Writing", "Translation", "Research",
]

SERVICES = [
    "Web Development", "Mobile App Development", "UI/UX Design", "Graphic Design",
    "Brand Identity", "Logo Design", "Photography", "Video Editing", "3D Animation",
    "Content Writing", "Marketing Strategy", "SEO Optimization",
    "Social Media Management", "E-commerce Development", "WordPress Development",
    "Consulting", "Training",
]

LANGUAGES = [
    "English", "Spanish", "French", "German", "Italian", "Portuguese", "Russian",
    "Chinese", "Japanese", "Korean", "Arabic", "Hindi", "Dutch", "Swedish", "Norwegian",
]

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

# List fields that the toggle endpoint can add/remove single values from
TOGGLEABLE_FIELDS = {
    "skills": SKILLS,
    "services": SERVICES,
    "languages": LANGUAGES,
    "preferred_communication": COMMUNICATION_METHODS,
    "project_types": PROJECT_TYPES,
}


def response_time_values():
    return [r["value"] for r in RESPONSE_TIMES]


def get_availability_options() -> dict:
    """Return every option list (used by the options endpoint)."""
    return {
        "timezones": TIMEZONES,
        "currencies": CURRENCIES,
        "response_times": RESPONSE_TIMES,
        "availability_statuses": AVAILABILITY_STATUSES,
        "communication_methods": COMMUNICATION_METHODS,
        "project_types": PROJECT_TYPES,
        "skills": SKILLS,
        "services": SERVICES,
        "languages": LANGUAGES,
    }
