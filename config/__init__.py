# DEPENDENCIES
from .settings import Settings
from .settings import settings
from .risk_rules import RiskRules


__all__ = ['Settings',
           'settings',
           'RiskRules',
          ]
