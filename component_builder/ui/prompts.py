import re

from .models import GenerationRequest

_LEADING_FENCE = re.compile(r"^\s*```[a-zA-Z0-9\-]*\n?")
_TRAILING_FENCE = re.compile(r"```\s*$")

INSTRUCTION_TEMPLATE = """You are an expert frontend developer. Generate a complete, production-ready {framework} component based on this description: "{description}"

Requirements:
- Framework: {framework}
- Styling: {styling}
- Fully functional, accessible, responsive, with comments and error handling.

Return ONLY the component code."""


def build_instruction(request: GenerationRequest) -> str:
    return INSTRUCTION_TEMPLATE.format(
        framework=request.framework,
        styling=request.styling,
        description=request.description,
    )


def strip_code_fences(text: str) -> str:
    """Drop one leading and one trailing ``` marker, then trim.

    Models often wrap the component in a fenced block such as ```tsx ... ```.
    """
    code = _LEADING_FENCE.sub("", text, count=1)
    code = _TRAILING_FENCE.sub("", code, count=1)
    return code.strip()
