# DEPENDENCIES
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from config.risk_rules import RiskRules


class SuggestionGenerator:
    """
    Build the remediation text shown next to a risky clause
    """
    def __init__(self, rules: type = RiskRules):
        self.rules = rules


    def suggest(self, category: str, risk_score: float) -> str:
        """
        Category advice prefixed with the risk tier

        Arguments:
        ----------
            category   { str }   : Clause category label

            risk_score { float } : Clause risk score

        Returns:
        --------
                 { str }         : e.g. "HIGH RISK: <advice> <call to action>"; plain advice below 0.25
        """
        base_suggestion  = self.rules.get_category_suggestion(category)
        prefix, closing  = self.rules.get_risk_tier(risk_score)

        return f"{prefix}{base_suggestion}{closing}"
