"""
CLI command for lock file provider security analysis.

Usage:
    terragrade                                  # ./.terraform.lock.hcl
    terragrade --file infra/.terraform.lock.hcl
    terragrade --debug                          # previews, per-request diagnostics

Exit codes:
    0 = analysis completed (individual lookups may have failed)
    10 = lock file missing or unreadable
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from terragrade.cli.ux import header, plain, rule, warning
from terragrade.clients.github import GitHubClient
from terragrade.clients.openai import OpenAIClient
from terragrade.clients.scorecard import ScorecardClient
from terragrade.config.settings import Settings, load_settings
from terragrade.core.errors import ExitCode, InputFileError, main_with_error_handling
from terragrade.enrichment.pipeline import AnalysisOutcome, EnrichmentPipeline
from terragrade.lockfile.extractor import IdentityExtractor
from terragrade.lockfile.models import ExtractionResult, ProviderIdentity

NAME_WIDTH = 25
PREVIEW_CHARS = 500


def score_glyph(score: float) -> str:
    if score >= 7:
        return "🟢"
    if score >= 5:
        return "🟡"
    return "🔴"


def format_status(identity: ProviderIdentity) -> str:
    """Status column for one provider in the summary table."""
    if identity.repository_exists is True:
        assessment = identity.scored
        if assessment is None:
            return "⚪ No scorecard"
        score = assessment.overall_score
        return f"{score_glyph(score)} Score: {round(score, 2)}"
    if identity.repository_exists is False:
        return "❌ No GitHub repo"
    return "❓ Unknown"


def format_summary_row(identity: ProviderIdentity) -> str:
    return f"{identity.full_name.ljust(NAME_WIDTH)} {format_status(identity)}"


def build_pipeline(settings: Settings) -> EnrichmentPipeline:
    github = GitHubClient(
        base_url=settings.github_base_url,
        timeout=settings.github_timeout,
        delay=settings.github_delay,
        user_agent=settings.user_agent,
        max_attempts=settings.http_max_attempts,
    )
    scorecard = ScorecardClient(
        base_url=settings.scorecard_base_url,
        timeout=settings.scorecard_timeout,
        delay=settings.scorecard_delay,
        user_agent=settings.user_agent,
        max_attempts=settings.http_max_attempts,
    )
    analyst = None
    if settings.openai_api_key:
        analyst = OpenAIClient(
            settings.openai_api_key,
            base_url=settings.openai_base_url,
            model=settings.openai_model,
            max_tokens=settings.openai_max_tokens,
            temperature=settings.openai_temperature,
            timeout=settings.openai_timeout,
            connect_timeout=settings.openai_connect_timeout,
            user_agent=settings.user_agent,
        )
    return EnrichmentPipeline(
        github,
        scorecard,
        analyst,
        low_score_threshold=settings.low_score_threshold,
    )


def read_lock_file(path: Path) -> str:
    if not path.is_file():
        raise InputFileError(f"File not found: {path}")
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise InputFileError(f"Could not read {path}", details={"error": str(exc)}) from exc


def _print_debug_block(title: str, lines: Sequence[str]) -> None:
    plain(f"=== DEBUG: {title} ===")
    for line in lines:
        plain(line)
    plain("=== END DEBUG ===")


def print_extraction_debug(result: ExtractionResult) -> None:
    _print_debug_block("Providers found", [f"  {name}" for name in result.full_names])
    _print_debug_block("URLs found", [f"  {url}" for url in result.urls])


def print_analysis(outcome: AnalysisOutcome) -> None:
    if outcome.skipped:
        warning("OPENAI_API_KEY not found. Skipping AI analysis.")
        return
    if outcome.error:
        warning(outcome.error)
        return
    plain()
    rule()
    plain("AI SECURITY ANALYSIS")
    rule()
    plain(outcome.text or "")
    rule()


def print_summary(identities: Sequence[ProviderIdentity]) -> None:
    header("SUMMARY OF PROVIDERS:")
    for identity in identities:
        plain(format_summary_row(identity))


@main_with_error_handling()
def analyze_command(
    file_path: str | None = None,
    *,
    debug: bool = False,
    settings: Settings | None = None,
) -> int:
    """
    Analyze the providers referenced by a Terraform lock file.

    Args:
        file_path: Lock file to read (defaults to settings.lock_file)
        debug: Print file preview, extracted providers and URLs
        settings: Explicit settings; loaded from the environment when omitted

    Returns:
        Exit code (0 on success)
    """
    settings = settings or load_settings()
    path = Path(file_path or settings.lock_file)

    header("Terraform Provider Security Analysis")

    content = read_lock_file(path)
    plain("Step 1: Reading Terraform lock file...")
    if debug:
        _print_debug_block("File content preview", [content[:PREVIEW_CHARS]])

    plain("Step 2: Extracting provider information...")
    result = IdentityExtractor(settings.registry_hosts).extract(content)
    identities = result.identities
    plain(f"  Found {len(identities)} unique providers")
    if debug:
        print_extraction_debug(result)

    pipeline = build_pipeline(settings)

    plain("Step 3: Checking GitHub repositories...")
    repositories = pipeline.check_repositories(identities)
    plain(f"  Found {repositories.existing}/{repositories.total} repositories on GitHub")

    plain("Step 4: Getting OSSF Security Scorecards...")
    scoring = pipeline.fetch_assessments(identities)
    plain(
        f"  Scored {scoring.scored}/{scoring.total} repositories "
        f"(avg: {scoring.average_score})"
    )

    plain("Step 5: Analyzing with AI...")
    print_analysis(pipeline.summarize(identities))

    print_summary(identities)
    return ExitCode.SUCCESS
