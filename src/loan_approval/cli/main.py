"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Loading application records from files
- Running the approval pipeline and printing results
"""
import argparse
import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from loan_approval._version import __version__
from loan_approval.api.models import ApplicationSubmission
from loan_approval.application.approval.batch import process_batch
from loan_approval.bootstrap import create_pipeline
from loan_approval.cli.formatters import format_output
from loan_approval.config import AppConfig, get_config_manager
from loan_approval.domain.base.exceptions import DomainException
from loan_approval.domain.loan.aggregate import LoanApplication
from loan_approval.domain.loan.value_objects import ProcessingStatus, parse_document_kinds
from loan_approval.infrastructure.error.exception_handler import get_exception_handler
from loan_approval.infrastructure.logging.logger import get_logger, setup_logging

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_AWAITING_DOCUMENTS = 2
EXIT_ERROR = 3

STATUS_EXIT_CODES = {
    ProcessingStatus.ACCEPTED: EXIT_OK,
    ProcessingStatus.REJECTED: EXIT_REJECTED,
    ProcessingStatus.AWAITING_DOCUMENTS: EXIT_AWAITING_DOCUMENTS,
}

# Reads the raw text of an application record
ApplicationLoader = Callable[[str], str]


def read_file(path: str) -> str:
    """Read an application record from the filesystem."""
    return Path(path).read_text(encoding="utf-8")


def load_application(path: str, loader: ApplicationLoader = read_file) -> LoanApplication:
    """
    Load one application record.

    Args:
        path: Location of a JSON or YAML record
        loader: Function returning the raw text stored at path

    Returns:
        The parsed application

    Raises:
        OSError: If the record cannot be read
        ValueError: If the record is not a mapping or is not valid JSON/YAML
        pydantic.ValidationError: If the record has malformed fields
    """
    text = loader(path)
    if path.endswith((".yaml", ".yml")):
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Application record {path} must contain a mapping")
    return ApplicationSubmission.model_validate(data).to_domain()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="loan-approval",
        description="Loan Approval - run loan applications through the approval pipeline",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s process --file application.json          # Process one application
  %(prog)s process --file app.yaml --format table   # Show the result as a table
  %(prog)s batch apps/*.json                        # Process several applications
  %(prog)s serve --port 8080                        # Start the HTTP API
        """
    )

    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--required-documents',
                        help='Comma separated document kinds, e.g. "IdentityProof, IncomeProof"')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    process_parser = subparsers.add_parser('process', help='Process one application')
    process_parser.add_argument('--file', required=True, help='Application record (JSON or YAML)')
    process_parser.add_argument('--format', choices=['json', 'yaml', 'table'], default='json',
                                help='Output format')

    batch_parser = subparsers.add_parser('batch', help='Process several applications')
    batch_parser.add_argument('files', nargs='+', help='Application records (JSON or YAML)')
    batch_parser.add_argument('--format', choices=['json', 'yaml', 'table'], default='json',
                              help='Output format')

    serve_parser = subparsers.add_parser('serve', help='Start the HTTP API server')
    serve_parser.add_argument('--host', help='Server host')
    serve_parser.add_argument('--port', type=int, help='Server port')

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides."""
    app_config = get_config_manager(args.config).get_typed(AppConfig)

    updates: Dict[str, Any] = {}
    if args.log_level:
        updates["logging"] = app_config.logging.model_copy(update={"level": args.log_level})
    if args.required_documents is not None:
        kinds = list(parse_document_kinds(args.required_documents))
        updates["pipeline"] = app_config.pipeline.model_copy(update={"required_documents": kinds})
    if getattr(args, 'host', None) or getattr(args, 'port', None):
        server_updates = {key: value for key, value in
                          (("host", args.host), ("port", args.port)) if value}
        updates["server"] = app_config.server.model_copy(update=server_updates)

    return app_config.model_copy(update=updates) if updates else app_config


def run_process(args: argparse.Namespace, app_config: AppConfig,
                loader: ApplicationLoader) -> int:
    """Process a single application and print its result."""
    pipeline = create_pipeline(app_config)
    result = pipeline.process(load_application(args.file, loader))
    print(format_output(result.to_dict(), args.format))
    return STATUS_EXIT_CODES[result.status]


def run_batch(args: argparse.Namespace, app_config: AppConfig,
              loader: ApplicationLoader) -> int:
    """Process several applications and print a report."""
    applications = [load_application(path, loader) for path in args.files]
    report = process_batch(create_pipeline(app_config), applications)
    print(format_output(report.to_dict(), args.format))
    return EXIT_OK


def run_serve(args: argparse.Namespace, app_config: AppConfig) -> int:
    """Start the HTTP API."""
    import uvicorn

    from loan_approval.api.server import create_fastapi_app

    app = create_fastapi_app(create_pipeline(app_config), app_config.server)
    config = uvicorn.Config(
        app,
        host=app_config.server.host,
        port=app_config.server.port,
        log_level=app_config.server.log_level,
    )
    server = uvicorn.Server(config)
    server.run()
    return EXIT_OK


def main(argv: Optional[List[str]] = None, loader: ApplicationLoader = read_file) -> int:
    """
    Main CLI entry point.

    Returns:
        Process exit status
    """
    args = parse_args(argv)
    if not args.command:
        print("Error: No command specified. Use --help for usage information.", file=sys.stderr)
        return EXIT_ERROR

    logger = get_logger(__name__)

    try:
        app_config = build_config(args)
        setup_logging(app_config.logging)

        if args.command == 'process':
            return run_process(args, app_config, loader)
        if args.command == 'batch':
            return run_batch(args, app_config, loader)
        return run_serve(args, app_config)

    except (DomainException, PydanticValidationError) as e:
        error_response = get_exception_handler().handle_error_for_http(e)
        print(f"Error: {error_response.message}", file=sys.stderr)
        for error in error_response.details.get("errors", []):
            location = ".".join(str(part) for part in error.get("loc", ()))
            print(f"  {location}: {error.get('msg')}", file=sys.stderr)
        return EXIT_ERROR
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Failed to read application record", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
