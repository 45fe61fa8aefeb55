import logging
import sys
import argparse

from core.app_context import AppContext
from core.config_loader import load_config
from core.exceptions import ATSError
from core.report_builder import ReportBuilder

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ATS Resume Matcher")
    parser.add_argument('--job-description', '-j', type=str, required=True,
                        help='Job description file (.txt, .md, .docx or .pdf)')
    parser.add_argument('--resume', '-r', type=str, required=True,
                        help='Resume file (.txt, .md, .docx or .pdf)')
    parser.add_argument('--config', '-c', type=str, default='config.yaml',
                        help='Path to config.yaml (default: config.yaml)')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: INFO)')
    return parser


def run_analysis(job_description_path: str, resume_path: str, config_path: str) -> str:
    """Load both documents, score them and return the rendered report.

    Raises:
        FileNotFoundError / ValueError: If a document cannot be loaded
        ATSError: If validation or the embedding service fails
    """
    config = load_config(config_path)
    ctx = AppContext.build(config)

    job_description = ctx.document_parser.parse(job_description_path).text
    resume = ctx.document_parser.parse(resume_path).text

    logger.info("Starting ATS analysis...")
    result = ctx.scoring_service.compute_ats_score(job_description, resume)
    return ReportBuilder.build_report(result, ctx.config.scoring)


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        report = run_analysis(args.job_description, args.resume, args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid input: {e}")
        return EXIT_INPUT_ERROR
    except ATSError as e:
        logger.error(f"ATS analysis failed: {e}")
        return EXIT_INPUT_ERROR

    print(report)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
