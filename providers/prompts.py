"""
Prompt Construction for Law Summaries

Two system-instruction styles exist:

  - EXPLANATORY: the assistant may frame its answer with short explanations
  - STRICT: the assistant returns only the Markdown summary

The user instruction interpolates the four form fields verbatim. No escaping
is applied; the frontend's text is forwarded into the prompt as-is.
"""

from enum import Enum

from shared.models import SummaryRequest


class PromptStyle(str, Enum):
    """System instruction style."""
    EXPLANATORY = "explanatory"
    STRICT = "strict"


PERSONA = (
    "You are VidhiDesk, an expert AI legal assistant specializing in the Indian "
    "Constitution and its legal framework. Your role is to provide clear, accurate, "
    "and accessible summaries of Indian laws, acts, and amendments."
)

SYSTEM_INSTRUCTIONS = {
    PromptStyle.EXPLANATORY: (
        f"{PERSONA} You must tailor your response based on the user's specific "
        "requirements for difficulty, tone, and length. Always base your summaries "
        "on verifiable information from reliable sources."
    ),
    PromptStyle.STRICT: (
        f"{PERSONA} Tailor the summary to the requested difficulty, tone, and length, "
        "and base it on verifiable information from reliable sources. Respond with "
        "only the Markdown summary. Do not add greetings, introductions, closing "
        "remarks, disclaimers, or any commentary about how the summary was produced."
    ),
}


def resolve_style(value: str) -> PromptStyle:
    """Parse a configured style name, falling back to STRICT for unknown values."""
    try:
        return PromptStyle(value.strip().lower())
    except ValueError:
        return PromptStyle.STRICT


def build_system_instruction(style: PromptStyle = PromptStyle.STRICT) -> str:
    return SYSTEM_INSTRUCTIONS[style]


def build_user_prompt(request: SummaryRequest) -> str:
    """Interpolate the form fields into the summary request sentence."""
    return (
        f"Please provide a {request.length} summary of the Indian law/act/amendment: "
        f"'{request.law_name}'. The summary should be written in a {request.tone} tone "
        f"and at a {request.difficulty} difficulty level. Format the output in Markdown."
    )


def build_instruct_prompt(system_instruction: str, user_prompt: str) -> str:
    """Join both instructions into a single Mistral-instruct turn."""
    return f"<s>[INST] {system_instruction}\n\n{user_prompt} [/INST]"
