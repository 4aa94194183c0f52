# DEPENDENCIES
import sys
from typing import Any
from typing import Tuple
from pathlib import Path

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from config.settings import settings


class InvalidInputError(ValueError):
    """
    Raised when the analyzer is handed something that is not document text
    """


class DocumentValidator:
    """
    Validate document text before it reaches the clause analyzer
    """
    EMPTY_CONTENT_MESSAGE = "Content cannot be empty"
    TOO_SHORT_MESSAGE     = "Text is too short. Please paste a complete terms and conditions document."
    NO_TEXT_MESSAGE       = "No readable text found in the uploaded file"


    @staticmethod
    def ensure_text(text: Any) -> str:
        """
        Guard the analyzer boundary

        Arguments:
        ----------
            text { Any } : Value handed to the analyzer

        Raises:
        -------
            InvalidInputError : If text is None or not a string
        """
        if text is None:
            raise InvalidInputError("Document text is required, got None")

        if not isinstance(text, str):
            raise InvalidInputError(f"Document text must be a string, got {type(text).__name__}")

        return text


    @staticmethod
    def validate_pasted_text(text: str, min_length: int = None) -> Tuple[bool, str, str]:
        """
        Validate pasted terms-and-conditions text

        Arguments:
        ----------
            text       { str } : Pasted text

            min_length { int } : Minimum length override (optional)

        Returns:
        --------
               { tuple }       : (is_valid, validation_type, message) tuple
        """
        if min_length is None:
            min_length = settings.MIN_PASTE_LENGTH

        if ((text is None) or (not text.strip())):
            return (False, "empty", DocumentValidator.EMPTY_CONTENT_MESSAGE)

        if (len(text) < min_length):
            return (False, "too_short", DocumentValidator.TOO_SHORT_MESSAGE)

        return DocumentValidator._check_max_length(text)


    @staticmethod
    def validate_extracted_text(text: str) -> Tuple[bool, str, str]:
        """
        Validate text that was read from a file
        """
        if ((text is None) or (not text.strip())):
            return (False, "empty", DocumentValidator.NO_TEXT_MESSAGE)

        return DocumentValidator._check_max_length(text)


    @staticmethod
    def _check_max_length(text: str) -> Tuple[bool, str, str]:
        if (len(text) > settings.MAX_DOCUMENT_LENGTH):
            return (False, "too_long", f"Text too long ({len(text)} chars, maximum {settings.MAX_DOCUMENT_LENGTH}).")

        return (True, "valid", f"Document accepted ({len(text)} chars).")
