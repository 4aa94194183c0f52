# DEPENDENCIES
import sys
from typing import List
from pathlib import Path
from typing import Hashable
from typing import Iterable
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from config.settings import settings
from config.risk_rules import RiskRules
from services.data_models import Clause
from services.data_models import Document
from services.risk_scorer import RiskScorer
from utils.text_processor import TextProcessor
from utils.logger import ConsentTrackerLogger
from utils.validators import DocumentValidator
from services.clause_ranker import ClauseRanker
from services.data_models import AnalysisReport
from services.clause_categorizer import ClauseCategorizer
from services.suggestion_generator import SuggestionGenerator


class ClauseAnalyzer:
    """
    Turns terms-of-service text into a ranked list of risky clauses

    Analysis Pipeline:
    1. Segmentation (lower-case, split on sentence terminators)
    2. Pre-filter (drop fragments shorter than MIN_CLAUSE_LENGTH)
    3. Risk scoring and categorization, per clause
    4. Suggestion synthesis
    5. Ranking (threshold, stable sort, top-N)

    Holds no per-call state, so one instance can serve concurrent analyses
    """
    def __init__(self, rules: type = RiskRules):
        """
        Initialize the analyzer with all pipeline components

        Arguments:
        ----------
            rules { type } : Rule table class (RiskRules by default)
        """
        self.rules                = rules
        self.text_processor       = TextProcessor()
        self.risk_scorer          = RiskScorer(rules = rules)
        self.categorizer          = ClauseCategorizer(rules = rules)
        self.suggestion_generator = SuggestionGenerator(rules = rules)
        self.ranker               = ClauseRanker(threshold   = rules.EMISSION_THRESHOLD,
                                                 max_clauses = rules.MAX_CLAUSES,
                                                )


    @ConsentTrackerLogger.log_execution_time("analyze_clauses")
    def analyze(self, document_id: Hashable, raw_text: str) -> List[Clause]:
        """
        Extract, score and rank the risky clauses of a document

        Arguments:
        ----------
            document_id { Hashable } : Identifier of the owning document

            raw_text      { str }    : Plain document text

        Returns:
        --------
                    { list }         : Ranked clauses, riskiest first

        Raises:
        -------
            InvalidInputError        : If raw_text is None or not a string
        """
        text       = DocumentValidator.ensure_text(raw_text)

        candidates = list()
        fragments  = self.text_processor.segment_clauses(text)

        for fragment in fragments:
            if not self.text_processor.is_candidate_clause(fragment, min_length = self.rules.MIN_CLAUSE_LENGTH):
                continue

            candidates.append(self._build_clause(document_id = document_id, clause_text = fragment))

        ranked     = self.ranker.rank(candidates)

        log_info("Clause analysis complete",
                 document_id = document_id,
                 segments    = len(fragments),
                 candidates  = len(candidates),
                 emitted     = len(ranked),
                )

        return ranked


    def analyze_document(self, document: Document) -> AnalysisReport:
        """
        Analyze a document and summarize the result

        Arguments:
        ----------
            document { Document } : Document whose content is analyzed

        Returns:
        --------
              { AnalysisReport }  : Ranked clauses with clause / high-risk counts and content length
        """
        clauses   = self.analyze(document_id = document.document_id,
                                 raw_text    = document.content,
                                )

        high_risk = sum(1 for clause in clauses if (clause.risk_score >= settings.HIGH_RISK_THRESHOLD))

        return AnalysisReport(document_id       = document.document_id,
                              filename          = document.filename,
                              clauses           = clauses,
                              clauses_found     = len(clauses),
                              high_risk_clauses = high_risk,
                              content_length    = len(document.content),
                             )


    @staticmethod
    def find_high_risk_clauses(clauses: Iterable[Clause], min_risk: Optional[float] = None) -> List[Clause]:
        """
        Clauses at or above a risk threshold, riskiest first (ties keep input order)

        Arguments:
        ----------
            clauses  { Iterable[Clause] } : Clauses from any number of documents

            min_risk      { float }       : Threshold, settings.HIGH_RISK_THRESHOLD when None
        """
        if min_risk is None:
            min_risk = settings.HIGH_RISK_THRESHOLD

        selected = [clause for clause in clauses if (clause.risk_score >= min_risk)]

        return sorted(selected, key = lambda clause: clause.risk_score, reverse = True)


    def _build_clause(self, document_id: Hashable, clause_text: str) -> Clause:
        assessment = self.risk_scorer.assess(clause_text = clause_text)
        category   = self.categorizer.categorize(clause_text = clause_text)
        suggestion = self.suggestion_generator.suggest(category   = category,
                                                       risk_score = assessment.score,
                                                      )

        return Clause(clause_text     = self.text_processor.to_display_case(clause_text),
                      category        = category,
                      risk_score      = assessment.score,
                      suggestion      = suggestion,
                      document_id     = document_id,
                      risk_indicators = assessment.indicators,
                     )
