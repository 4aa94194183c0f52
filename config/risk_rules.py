# DEPENDENCIES
import re
from typing import Tuple
from types import MappingProxyType


class RiskRules:
    """
    Weighted pattern tables for terms-of-service risk scoring

    All tables are built once at import time and are read-only afterwards, so a single
    class can be shared by every concurrent analysis
    """
    # Scoring constants
    MIN_CLAUSE_LENGTH   = 15
    EMISSION_THRESHOLD  = 0.15
    MAX_CLAUSES         = 25
    ESCALATION_STEP     = 0.1
    DEFAULT_CATEGORY    = "General Terms"

    # (pattern, weight, description): patterns are searched against lower-cased clause text
    RISK_PATTERNS       = (# Data collection & usage
                           (r'collect.*personal data',   0.90, "Collects personal data"),
                           (r'share.*third parties',     0.90, "Shares data with third parties"),
                           (r'sell.*information',        0.95, "Sells user information"),
                           (r'location.*tracking',       0.85, "Tracks user location"),
                           (r'biometric',                0.90, "Uses biometric data"),
                           (r'indefinitely',             0.85, "Indefinite duration"),
                           (r'unlimited',                0.80, "Unlimited scope"),
                           (r'permanent',                0.80, "Permanent grant"),
                           (r'irrevocable',              0.90, "Irrevocable grant"),

                           # Data sharing
                           (r'share.*without.*consent',  0.95, "Shares data without consent"),
                           (r'transfer.*overseas',       0.80, "Transfers data overseas"),
                           (r'affiliate.*company',       0.70, "Shares with affiliate companies"),
                           (r'business.*partner',        0.70, "Shares with business partners"),

                           # Tracking & advertising
                           (r'cookies',                  0.60, "Uses cookies"),
                           (r'analytics',                0.50, "Uses analytics"),
                           (r'advertising',              0.70, "Advertising use"),
                           (r'marketing',                0.60, "Marketing use"),
                           (r'tracking',                 0.70, "Tracking"),
                           (r'behavioral',               0.75, "Behavioral profiling"),
                           (r'cross.*device',            0.80, "Cross-device tracking"),
                           (r'fingerprint',              0.85, "Device fingerprinting"),

                           # Rights & control
                           (r'cannot.*opt.out',          0.90, "No opt-out"),
                           (r'no.*control',              0.80, "No user control"),
                           (r'automatic.*renewal',       0.70, "Automatic renewal"),
                           (r'no.*refund',               0.75, "No refunds"),
                           (r'terminate.*account',       0.60, "Account termination"),
                           (r'suspend.*service',         0.60, "Service suspension"),
                           (r'delete.*account',          0.50, "Account deletion"),

                           # Legal & liability
                           (r'not.*liable',              0.70, "Liability exclusion"),
                           (r'waive.*rights',            0.85, "Waiver of rights"),
                           (r'arbitration',              0.60, "Arbitration"),
                           (r'class.*action',            0.65, "Class action restriction"),
                           (r'governing.*law',           0.30, "Governing law"),
                           (r'disclaim.*warranty',       0.70, "Warranty disclaimer"),
                           (r'limitation.*liability',    0.60, "Limitation of liability"),

                           # Changes & modifications
                           (r'modify.*terms',            0.50, "Terms may be modified"),
                           (r'change.*policy',           0.40, "Policy may change"),
                           (r'without.*notice',          0.80, "Changes without notice"),
                           (r'sole.*discretion',         0.70, "Sole discretion"),
                           (r'at.*any.*time',            0.60, "At any time"),

                           # Financial & subscription
                           (r'auto.*renew',              0.70, "Auto-renewal"),
                           (r'recurring.*charge',        0.60, "Recurring charges"),
                           (r'cancellation.*fee',        0.80, "Cancellation fee"),
                           (r'early.*termination',       0.70, "Early termination penalty"),
                          )

    # (name, required substring, any-of substrings, score floor): literal checks, not regex
    OVERRIDE_BOOSTS     = (("sale_of_data",  "sell",   ("data", "information"), 0.90),
                           ("opt_out_block", "cannot", ("opt",),                0.85),
                          )

    # First match wins, so this order is part of the categorizer's behavior
    CATEGORY_PATTERNS   = ((r'data|information|personal|collect|store|process', "Data Collection"),
                           (r'share|third.party|partner|affiliate|sell',        "Data Sharing"),
                           (r'track|cookie|analytics|advertising|marketing',    "Tracking & Analytics"),
                           (r'cancel|terminate|refund|subscription',            "Cancellation & Refunds"),
                           (r'liable|responsibility|warranty|damages',          "Liability & Warranties"),
                           (r'modify|change|update|amend',                      "Terms Modification"),
                           (r'location|gps|geolocation',                        "Location Services"),
                           (r'arbitration|dispute|court|legal',                 "Legal & Disputes"),
                           (r'payment|billing|charge|fee',                      "Payment Terms"),
                           (r'account|profile|user',                            "Account Management"),
                          )

    CATEGORY_SUGGESTIONS = MappingProxyType({"Data Collection"        : "Review what personal data is collected and if it's necessary for the service. Check if you can limit data collection.",
                                             "Data Sharing"           : "Check if you can opt-out of data sharing with third parties. Understand who your data is shared with.",
                                             "Tracking & Analytics"   : "Look for cookie preferences or tracking opt-out options in privacy settings.",
                                             "Cancellation & Refunds" : "Understand the cancellation process, notice periods, and refund policy before subscribing.",
                                             "Liability & Warranties" : "Be aware of limited liability clauses that may affect your legal rights in case of issues.",
                                             "Terms Modification"     : "Check how you'll be notified of changes to terms and your options if you disagree with changes.",
                                             "Location Services"      : "Consider if location tracking is necessary for the service and review location privacy settings.",
                                             "Legal & Disputes"       : "Understand dispute resolution processes, arbitration clauses, and your legal rights.",
                                             "Payment Terms"          : "Review billing cycles, automatic renewals, and cancellation fees before agreeing to paid services.",
                                             "Account Management"     : "Understand account termination policies and what happens to your data when you close your account.",
                                            })

    GENERIC_SUGGESTION  = "Review this clause carefully and consider its implications."

    # (minimum score, prefix, closing sentence): checked top-down, first satisfied tier wins
    RISK_TIERS          = ((0.70, "HIGH RISK: ",   " Consider if you're comfortable accepting these terms or if alternatives exist."),
                           (0.50, "MEDIUM RISK: ", " Weigh the benefits against potential privacy concerns."),
                           (0.25, "LOW RISK: ",    ""),
                          )


    @classmethod
    def compiled_risk_patterns(cls) -> Tuple[Tuple[re.Pattern, float, str], ...]:
        """
        Risk patterns compiled once, in declaration order
        """
        return _COMPILED_RISK_PATTERNS


    @classmethod
    def compiled_category_patterns(cls) -> Tuple[Tuple[re.Pattern, str], ...]:
        """
        Category patterns compiled once, in declaration order
        """
        return _COMPILED_CATEGORY_PATTERNS


    @classmethod
    def get_category_suggestion(cls, category: str) -> str:
        """
        Base remediation sentence for a category, generic sentence for unknown ones
        """
        return cls.CATEGORY_SUGGESTIONS.get(category, cls.GENERIC_SUGGESTION)


    @classmethod
    def get_risk_tier(cls, risk_score: float) -> Tuple[str, str]:
        """
        Get the (prefix, closing sentence) pair for a risk score

        Arguments:
        ----------
            risk_score { float } : Clause risk score in [0, 1]

        Returns:
        --------
                 { tuple }       : Empty strings when the score is below every tier
        """
        for minimum, prefix, closing in cls.RISK_TIERS:
            if (risk_score >= minimum):
                return prefix, closing

        return "", ""


_COMPILED_RISK_PATTERNS     = tuple((re.compile(pattern, re.IGNORECASE), weight, description) for pattern, weight, description in RiskRules.RISK_PATTERNS)

_COMPILED_CATEGORY_PATTERNS = tuple((re.compile(pattern, re.IGNORECASE), label) for pattern, label in RiskRules.CATEGORY_PATTERNS)
