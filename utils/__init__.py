# DEPENDENCIES
from .text_processor import TextProcessor
from .validators import DocumentValidator
from .validators import InvalidInputError
from .logger import ConsentTrackerLogger


__all__ = ['TextProcessor',
           'DocumentValidator',
           'InvalidInputError',
           'ConsentTrackerLogger',
          ]
