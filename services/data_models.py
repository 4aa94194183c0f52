# DEPENDENCIES
from typing import Any
from typing import Dict
from typing import List
from typing import Tuple
from typing import Hashable
from datetime import datetime
from dataclasses import field
from dataclasses import dataclass


PASTED_TEXT_FILENAME = "Pasted Text"


@dataclass
class Document:
    """
    Source document handed to the analyzer: only `content` is read by the scoring engine
    """
    document_id : Hashable
    filename    : str
    content     : str
    created_at  : datetime = field(default_factory = datetime.now)

    @classmethod
    def from_pasted_text(cls, document_id: Hashable, content: str) -> "Document":
        return cls(document_id = document_id,
                   filename    = PASTED_TEXT_FILENAME,
                   content     = content,
                  )


@dataclass(frozen = True)
class RiskAssessment:
    """
    Outcome of scoring a single clause against the risk rule table
    """
    score         : float                    # 0.0-1.0
    matched_rules : int                      # Number of distinct risk patterns that matched
    indicators    : Tuple[str, ...] = ()     # Descriptions of the matched patterns, in table order
    overrides     : Tuple[str, ...] = ()     # Override boosts that fired


@dataclass(frozen = True)
class Clause:
    """
    Risky clause produced by the analyzer; immutable once built
    """
    clause_text     : str
    category        : str
    risk_score      : float                  # (0.15, 1.0]
    suggestion      : str
    document_id     : Hashable               # Owning document, by identifier only
    risk_indicators : Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization
        """
        return {"clause_text"     : self.clause_text,
                "category"        : self.category,
                "risk_score"      : round(self.risk_score, 3),
                "suggestion"      : self.suggestion,
                "document_id"     : self.document_id,
                "risk_indicators" : list(self.risk_indicators),
               }


@dataclass
class AnalysisReport:
    """
    Ranked clauses for one document plus the headline statistics shown to the user
    """
    document_id       : Hashable
    filename          : str
    clauses           : List[Clause]
    clauses_found     : int
    high_risk_clauses : int
    content_length    : int

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary
        """
        return {"document_id"       : self.document_id,
                "filename"          : self.filename,
                "clauses_found"     : self.clauses_found,
                "high_risk_clauses" : self.high_risk_clauses,
                "content_length"    : self.content_length,
                "clauses"           : [clause.to_dict() for clause in self.clauses],
               }
