# DEPENDENCIES
import re
import sys
from typing import List
from pathlib import Path

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from config.risk_rules import RiskRules


class TextProcessor:
    """
    Text splitting and normalization utilities for clause extraction
    """
    # Any run of sentence terminators counts as one delimiter
    SENTENCE_DELIMITER = re.compile(r'[.!?]+')


    @staticmethod
    def segment_clauses(text: str) -> List[str]:
        """
        Split document text into candidate clauses

        Arguments:
        ----------
            text { str } : Raw document text

        Returns:
        --------
              { list }   : Lower-cased, trimmed fragments in document order (may include empty strings)
        """
        lowered = text.lower()

        return [fragment.strip() for fragment in TextProcessor.SENTENCE_DELIMITER.split(lowered)]


    @staticmethod
    def is_candidate_clause(fragment: str, min_length: int = RiskRules.MIN_CLAUSE_LENGTH) -> bool:
        """
        Drop headers, fragments and noise shorter than the minimum clause length
        """
        return len(fragment.strip()) >= min_length


    @staticmethod
    def to_display_case(text: str) -> str:
        """
        Upper-case the first character only
        """
        if not text:
            return text

        return text[0].upper() + text[1:]
