"""Writing type classification labels."""

from typing import Optional

WRITING_TYPES = {
    "professional": ("Professional/Business", "PRO", "Work emails, reports, LinkedIn posts"),
    "academic": ("Academic Writing", "ACA", "Essays, research papers, thesis work"),
    "creative": ("Creative Writing", "CRE", "Stories, poetry, personal blogs"),
    "personal": ("Personal/Casual", "PER", "Journals, letters, reflections"),
    "technical": ("Technical Documentation", "TEC", "Technical docs, guides, specifications"),
}

DEFAULT_LABEL = "General"
DEFAULT_ABBREV = "GEN"


def is_writing_type(value: Optional[str]) -> bool:
    return bool(value) and value in WRITING_TYPES


def writing_type_label(value: Optional[str]) -> str:
    if not is_writing_type(value):
        return DEFAULT_LABEL
    return WRITING_TYPES[value][0]


def writing_type_abbrev(value: Optional[str]) -> str:
    if not is_writing_type(value):
        return DEFAULT_ABBREV
    return WRITING_TYPES[value][1]


def writing_type_description(value: Optional[str]) -> str:
    if not is_writing_type(value):
        return ""
    return WRITING_TYPES[value][2]
