"""
Command-line content analysis.

Usage:
    hookscore-analyze post.txt --type tweet
    cat draft.md | hookscore-analyze --json
    hookscore-analyze a.txt --compare b.txt
    hookscore-analyze post.txt --rewrite
"""

import argparse
import json
import sys
from typing import List, Optional

from ..config import get_settings
from ..scoring import run_smart_analysis
from ..types.scoring import AnalysisReport, HookRewriteResult
from ..utils.content import get_preview, sanitize_content
from .compare import compare_analyses, format_diff, score_band
from .engine import analyze_content, analyze_pair, resolve_content_type
from .rewrite import rewrite_hook


def _read_input(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _prepare(raw: str, label: str) -> str:
    content = sanitize_content(raw)
    if not content:
        raise ValueError(f"{label} is empty.")
    max_length = get_settings().analysis.max_content_length
    if len(content) > max_length:
        raise ValueError(f"{label} is too long. Max {max_length:,} characters.")
    return content


def format_report(report: AnalysisReport) -> str:
    """Human-readable rendering of an analysis report."""
    lines = [
        f"Overall: {report.overall_score}/100 ({score_band(report.overall_score)}) "
        f"[{report.detected_type.value}, {report.provider}]",
        "",
        f"Hook Strength:  {report.hook_strength.score}",
        f"  {report.hook_strength.feedback}",
    ]
    if report.hook_strength.techniques:
        lines.append(f"  Techniques: {', '.join(report.hook_strength.techniques)}")
    lines += [
        f"Structure:      {report.structure.score}",
        f"  {report.structure.feedback}",
        f"Emotional Pull: {report.emotional_triggers.score}",
        f"  {report.emotional_triggers.feedback}",
    ]
    if report.emotional_triggers.triggers:
        lines.append(f"  Triggers: {', '.join(report.emotional_triggers.triggers)}")

    readability = report.readability
    tone = report.tone
    lines += [
        "",
        f"Readability: {readability.flesch_reading_ease} ({readability.grade_level}), "
        f"{readability.word_count} words, ~{readability.reading_time_seconds}s read",
        f"Tone: {tone.voice}; formality {tone.formality.level} ({tone.formality.score}), "
        f"confidence {tone.confidence.level} ({tone.confidence.score})",
    ]

    if report.improvements:
        lines += ["", "Improvements:"]
        lines += [f"  {i}. {item}" for i, item in enumerate(report.improvements, 1)]

    lines += ["", report.summary]
    return "\n".join(lines)


def format_rewrites(result: HookRewriteResult) -> str:
    """Human-readable rendering of hook rewrites."""
    lines = [f"Hook rewrites [{result.provider}]"]
    for i, rewrite in enumerate(result.rewrites, 1):
        lines += ["", f"{i}. {rewrite.style}", f"   \"{rewrite.hook}\""]
        if rewrite.why:
            lines.append(f"   {rewrite.why}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Score the hook, structure and emotional pull of a post or article"
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="File to analyze (reads stdin when omitted or '-')",
    )
    parser.add_argument(
        "--type",
        dest="content_type",
        choices=["tweet", "article", "auto"],
        default="auto",
        help="Content type (default: auto-detect)",
    )
    parser.add_argument("--json", action="store_true", help="Print the full report as JSON")
    parser.add_argument(
        "--heuristic-only",
        action="store_true",
        help="Never call a remote LLM provider",
    )
    parser.add_argument(
        "--compare",
        metavar="OTHER_FILE",
        help="Compare the input (version A) against OTHER_FILE (version B)",
    )
    parser.add_argument(
        "--rewrite",
        action="store_true",
        help="Suggest three stronger hooks instead of scoring",
    )
    args = parser.parse_args(argv)

    try:
        content = _prepare(_read_input(args.file), "Content")
        other = _prepare(_read_input(args.compare), "Comparison content") if args.compare else None
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if other is not None:
        result_a, result_b = analyze_pair(content, other, args.content_type)
        comparison = compare_analyses(result_a, result_b)
        if args.json:
            print(json.dumps(comparison.to_dict(), indent=2, ensure_ascii=False))
        else:
            print(comparison.summary)
            for dimension in comparison.dimensions:
                print(
                    f"  {dimension.label:15} A {dimension.score_a:3}  B {dimension.score_b:3}  "
                    f"{format_diff(dimension.diff)}"
                )
            print(f"\nA: {get_preview(content, 60)}")
            print(f"B: {get_preview(other, 60)}")
        return 0

    if args.rewrite:
        analysis = run_smart_analysis(content, resolve_content_type(content, args.content_type))
        result = rewrite_hook(
            content, args.content_type, analysis, allow_remote=not args.heuristic_only
        )
        if args.json:
            print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        else:
            print(format_rewrites(result))
        return 0

    report = analyze_content(content, args.content_type, allow_remote=not args.heuristic_only)
    if args.json:
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
