# DEPENDENCIES
import sys
import time
import json
import logging
import traceback
from typing import Any
from typing import Dict
from pathlib import Path
from typing import Optional
from functools import wraps
from datetime import datetime

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from config.settings import settings


class ConsentTrackerLogger:
    """
    Logging for terms-of-service analysis
    Features:
    - Structured JSON logging
    - Separate channels for errors and performance
    - Optional log files (settings.LOG_TO_FILE)
    """
    _loggers : Dict[str, logging.Logger] = dict()
    _log_dir : Optional[Path]            = None


    @classmethod
    def setup(cls, log_dir: Optional[str] = None, app_name: str = "consent_tracker", level: Optional[str] = None):
        """
        Setup logging system

        Arguments:
        ----------
            log_dir  { str } : Directory for log files, console only when None

            app_name { str } : Application name for log files

            level    { str } : Level name for the main logger (defaults to settings.LOG_LEVEL)
        """
        cls._log_dir = Path(log_dir) if log_dir else None

        if cls._log_dir:
            cls._log_dir.mkdir(parents = True, exist_ok = True)

        main_level = logging.getLevelName((level or settings.LOG_LEVEL).upper())

        if not isinstance(main_level, int):
            main_level = logging.INFO

        # Create main logger
        cls._create_logger(name     = app_name,
                           log_file = cls._log_file(f"{app_name}.log"),
                           level    = main_level,
                          )

        # Create error logger
        cls._create_logger(name     = f"{app_name}.error",
                           log_file = cls._log_file(f"{app_name}_error.log"),
                           level    = logging.ERROR,
                          )

        # Create performance logger
        cls._create_logger(name     = f"{app_name}.performance",
                           log_file = cls._log_file(f"{app_name}_performance.log"),
                           level    = logging.INFO,
                          )


    @classmethod
    def _log_file(cls, filename: str) -> Optional[Path]:
        if cls._log_dir is None:
            return None

        return cls._log_dir / filename


    @classmethod
    def _create_logger(cls, name: str, log_file: Optional[Path], level: int) -> logging.Logger:
        """
        Create and configure a logger
        """
        logger          = logging.getLogger(name)
        logger.setLevel(level)

        # Clear existing handlers
        logger.handlers.clear()

        # Formatter
        formatter       = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt = '%Y-%m-%d %H:%M:%S')

        # File handler
        if log_file is not None:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        # Console handler (warnings and above, on stderr)
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        cls._loggers[name] = logger

        return logger


    @classmethod
    def get_logger(cls, name: str = "consent_tracker") -> logging.Logger:
        """
        Get logger by name
        """
        if name not in cls._loggers:
            # Lazy initialization
            cls.setup(log_dir = settings.LOG_DIR if settings.LOG_TO_FILE else None)

        return cls._loggers.get(name, logging.getLogger(name))


    @classmethod
    def log_structured(cls, level: int, message: str, **kwargs):
        """
        Log structured data as JSON

        Arguments:
        ----------
            level      { int } : Log level

            message    { str } : Log message

            **kwargs           : Additional structured data
        """
        logger   = cls.get_logger()

        log_data = {"timestamp" : datetime.now().isoformat(),
                    "message"   : message,
                    **kwargs
                   }

        logger.log(level, json.dumps(log_data, default = str))


    @classmethod
    def log_error(cls, error: Exception, context: Dict[str, Any] = None):
        """
        Log error with full traceback and context

        Arguments:
        ----------
            error      { Exception } : Exception object

            context      { dict }    : Additional context dictionary
        """
        cls.get_logger()
        error_logger = cls._loggers.get("consent_tracker.error")

        if not error_logger:
            error_logger = cls.get_logger()

        error_data   = {"timestamp"     : datetime.now().isoformat(),
                        "error_type"    : type(error).__name__,
                        "error_message" : str(error),
                        "traceback"     : traceback.format_exc(),
                        "context"       : context or {},
                       }

        error_logger.error(json.dumps(error_data, indent = 2, default = str))


    @classmethod
    def log_performance(cls, operation: str, duration: float, **metrics):
        """
        Log performance metrics

        Arguments:
        ----------
            operation  { str }  : Operation name

            duration  { float } : Duration in seconds

            **metrics           : Additional metrics
        """
        cls.get_logger()
        perf_logger = cls._loggers.get("consent_tracker.performance")

        if not perf_logger:
            perf_logger = cls.get_logger()

        perf_data   = {"timestamp"        : datetime.now().isoformat(),
                       "operation"        : operation,
                       "duration_seconds" : round(duration, 3),
                       **metrics
                      }

        perf_logger.info(json.dumps(perf_data, default = str))


    @staticmethod
    def log_execution_time(operation_name: str = None):
        """
        Decorator to log execution time of functions
        """
        def decorator(func):
            @wraps(func)
            def wrapper(*args, **kwargs):
                op_name    = operation_name or func.__name__
                start_time = time.time()

                try:
                    result   = func(*args, **kwargs)
                    duration = time.time() - start_time

                    ConsentTrackerLogger.log_performance(operation = op_name,
                                                         duration  = duration,
                                                         status    = "success",
                                                        )

                    return result

                except Exception as e:
                    duration = time.time() - start_time

                    ConsentTrackerLogger.log_performance(operation = op_name,
                                                         duration  = duration,
                                                         status    = "error",
                                                         error     = str(e),
                                                        )

                    ConsentTrackerLogger.log_error(e, context = {"operation" : op_name})
                    raise

            return wrapper

        return decorator



# Convenience functions
def log_info(message: str, **kwargs):
    """
    Log info message
    """
    ConsentTrackerLogger.log_structured(logging.INFO, message, **kwargs)


def log_warning(message: str, **kwargs):
    """
    Log warning message
    """
    ConsentTrackerLogger.log_structured(logging.WARNING, message, **kwargs)
