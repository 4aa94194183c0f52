# DEPENDENCIES
from .data_models import Clause
from .data_models import Document
from .risk_scorer import RiskScorer
from .clause_ranker import ClauseRanker
from .data_models import AnalysisReport
from .data_models import RiskAssessment
from .clause_analyzer import ClauseAnalyzer
from .clause_categorizer import ClauseCategorizer
from .suggestion_generator import SuggestionGenerator



__all__ = ['Clause',
           'Document',
           'RiskScorer',
           'ClauseRanker',
           'AnalysisReport',
           'RiskAssessment',
           'ClauseAnalyzer',
           'ClauseCategorizer',
           'SuggestionGenerator',
          ]
