# transformer/instruction.py

INSTRUCTION_TEMPLATE = (
    "As an expert prompt engineer, improve the following prompt to make it more "
    "effective, clear, and likely to produce the desired outcome: \"{prompt}\""
)

NO_RESPONSE_MESSAGE = "No response text received from the API"
GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def build_instruction(prompt: str) -> str:
    """Wrap the user's raw prompt in the improvement instruction."""
    return INSTRUCTION_TEMPLATE.format(prompt=prompt)


def error_message(error: BaseException) -> str:
    """Return the human-readable message carried by an error, else the fallback."""
    # Provider SDK errors keep the bare message on .message; str() adds status codes
    message = getattr(error, "message", None)
    if isinstance(message, str) and message.strip():
        return message
    text = str(error)
    return text if text.strip() else GENERIC_ERROR_MESSAGE
