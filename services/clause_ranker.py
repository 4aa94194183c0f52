# DEPENDENCIES
import sys
from typing import List
from pathlib import Path
from typing import Iterable

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from config.risk_rules import RiskRules
from services.data_models import Clause


class ClauseRanker:
    """
    Select the clauses worth showing: threshold, order by risk, cap the count
    """
    def __init__(self, threshold: float = RiskRules.EMISSION_THRESHOLD, max_clauses: int = RiskRules.MAX_CLAUSES):
        self.threshold   = threshold
        self.max_clauses = max_clauses


    def rank(self, clauses: Iterable[Clause]) -> List[Clause]:
        """
        Arguments:
        ----------
            clauses { Iterable[Clause] } : Scored clauses in document order

        Returns:
        --------
                   { list }              : At most max_clauses clauses above the threshold, riskiest first
        """
        kept = [clause for clause in clauses if (clause.risk_score > self.threshold)]

        # sorted() is stable, so equal scores keep document order
        kept = sorted(kept, key = lambda clause: clause.risk_score, reverse = True)

        return kept[:self.max_clauses]
