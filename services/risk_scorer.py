# DEPENDENCIES
import sys
from typing import List
from pathlib import Path

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from config.risk_rules import RiskRules
from services.data_models import RiskAssessment


class RiskScorer:
    """
    Pattern-based clause risk scoring

    Scoring:
    1. Highest weight among matching risk patterns
    2. Escalation bonus of ESCALATION_STEP per additional matching pattern (capped at 1.0)
    3. Override boosts that floor the score for specific literal word combinations
    """
    def __init__(self, rules: type = RiskRules):
        self.rules    = rules
        self.patterns = rules.compiled_risk_patterns()


    def score(self, clause_text: str) -> float:
        """
        Risk score of a clause in [0, 1]
        """
        return self.assess(clause_text = clause_text).score


    def assess(self, clause_text: str) -> RiskAssessment:
        """
        Score a clause and keep track of what drove the score

        Arguments:
        ----------
            clause_text { str } : Lower-cased clause text

        Returns:
        --------
             { RiskAssessment } : Score, match count, matched indicators and fired overrides
        """
        max_risk   = 0.0
        indicators = list()

        # Single pass tracks both the maximum weight and the number of matches
        for pattern, weight, description in self.patterns:
            if pattern.search(clause_text):
                max_risk = max(max_risk, weight)
                indicators.append(description)

        matched_rules = len(indicators)

        if (matched_rules > 1):
            max_risk = min(1.0, max_risk + (matched_rules - 1) * self.rules.ESCALATION_STEP)

        overrides     = self._fired_overrides(clause_text = clause_text)

        for _, floor in overrides:
            max_risk = max(max_risk, floor)

        return RiskAssessment(score         = min(1.0, max(0.0, max_risk)),
                              matched_rules = matched_rules,
                              indicators    = tuple(indicators),
                              overrides     = tuple(name for name, _ in overrides),
                             )


    def _fired_overrides(self, clause_text: str) -> List[tuple]:
        """
        Literal substring checks, independent of the rule table
        """
        fired = list()

        for name, required, any_of, floor in self.rules.OVERRIDE_BOOSTS:
            if ((required in clause_text) and any(word in clause_text for word in any_of)):
                fired.append((name, floor))

        return fired
