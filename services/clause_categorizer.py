# DEPENDENCIES
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from config.risk_rules import RiskRules


class ClauseCategorizer:
    """
    Assign a topic label to a clause: the first category pattern that matches wins
    """
    def __init__(self, rules: type = RiskRules):
        self.patterns      = rules.compiled_category_patterns()
        self.default_label = rules.DEFAULT_CATEGORY


    def categorize(self, clause_text: str) -> str:
        for pattern, label in self.patterns:
            if pattern.search(clause_text):
                return label

        return self.default_label
