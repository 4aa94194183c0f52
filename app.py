# app.py
# DEPENDENCIES
import sys
import json
import uuid
import argparse
from typing import Any
from typing import List
from pathlib import Path
from typing import Optional

# Add parent directory to path
sys.path.append(str(Path(__file__).parent))

from utils.logger import log_info
from utils.logger import log_warning
from config.settings import settings
from services.data_models import Document
from utils.validators import DocumentValidator
from services.clause_analyzer import ClauseAnalyzer


def build_parser() -> argparse.ArgumentParser:
    parser         = argparse.ArgumentParser(prog = "consent-tracker", description = f"{settings.APP_NAME} CLI")
    subparsers     = parser.add_subparsers(dest = "command", required = True)

    analyze_parser = subparsers.add_parser("analyze", help = "Rank the risky clauses of a terms-of-service document")
    analyze_parser.add_argument("file",
                                nargs   = "?",
                                type    = Path,
                                help    = "Plain text document; reads pasted text from stdin when omitted",
                               )
    analyze_parser.add_argument("--document-id",
                                dest    = "document_id",
                                default = None,
                                help    = "Identifier attached to every clause (random when omitted)",
                               )
    analyze_parser.add_argument("--min-risk",
                                dest    = "min_risk",
                                type    = float,
                                default = None,
                                help    = "Only print clauses at or above this risk score",
                               )
    analyze_parser.add_argument("--output",
                                type    = Path,
                                default = None,
                                help    = "Write the JSON report to a file instead of stdout",
                               )

    return parser


def load_document(file: Optional[Path], document_id: str) -> tuple:
    """
    Read the document and validate it the way its source requires

    Returns:
    --------
        { tuple } : (document or None, error message or None)
    """
    if file is None:
        content              = sys.stdin.read()
        is_valid, _, message = DocumentValidator.validate_pasted_text(content)

        if not is_valid:
            return None, message

        return Document.from_pasted_text(document_id = document_id, content = content), None

    try:
        content = file.read_text(encoding = "utf-8", errors = "replace")

    except OSError as e:
        return None, f"Failed to read file: {e.strerror or e}"

    is_valid, _, message = DocumentValidator.validate_extracted_text(content)

    if not is_valid:
        return None, message

    return Document(document_id = document_id, filename = file.name, content = content), None


def _write_output(result: Any, path: Optional[Path]) -> None:
    if not path:
        print(json.dumps(result, indent = 2, default = str))
        return

    path.write_text(json.dumps(result, indent = 2, default = str), encoding = "utf-8")


def run_analyze(args: argparse.Namespace) -> int:
    document_id     = args.document_id or str(uuid.uuid4())
    document, error = load_document(file = args.file, document_id = document_id)

    if error:
        log_warning("Document rejected", document_id = document_id, reason = error)
        print(json.dumps({"error": error}), file = sys.stderr)
        return 1

    report          = ClauseAnalyzer().analyze_document(document)
    result          = report.to_dict()

    if args.min_risk is not None:
        high_risk         = ClauseAnalyzer.find_high_risk_clauses(report.clauses, min_risk = args.min_risk)
        result["clauses"] = [clause.to_dict() for clause in high_risk]

    log_info("Report ready", document_id = document_id, clauses_found = report.clauses_found, high_risk_clauses = report.high_risk_clauses)

    _write_output(result, args.output)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if (args.command == "analyze"):
        return run_analyze(args)

    return 2


if __name__ == "__main__":
    sys.exit(main())
