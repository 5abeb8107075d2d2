from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from app.schemas.ats import ATSScore, ResumeContent
from app.services.ats_service import calculate_ats_score

_DIMENSION_LABELS = (
    ("keywords", "Keywords"),
    ("hard_skills", "Hard skills"),
    ("job_title", "Job title"),
    ("education", "Education"),
    ("format", "Format"),
    ("soft_skills", "Soft skills"),
)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Score a structured resume against a job description.")
    p.add_argument("--resume", required=True, help="Path to resume JSON (summary, experience, skills, education)")
    p.add_argument("--jd", required=True, help="Path to job description text")
    p.add_argument("--title", required=True, help="Target job title")
    p.add_argument("--out-json", default=None, help="Write the full score object to this path")
    return p


def render_text(score: ATSScore) -> str:
    lines = [f"ATS score: {score.overall}/100 ({score.rating})", ""]
    for key, label in _DIMENSION_LABELS:
        dimension = getattr(score.breakdown, key)
        lines.append(f"  {label:<12} {dimension.score:>2}/{dimension.max}")
    if score.suggestions:
        lines.append("")
        lines.append("Suggestions:")
        lines.extend(f"  - {suggestion}" for suggestion in score.suggestions)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    resume = ResumeContent.model_validate(json.loads(Path(args.resume).read_text(encoding="utf-8")))
    jd_text = Path(args.jd).read_text(encoding="utf-8", errors="ignore")

    score = calculate_ats_score(resume, jd_text, args.title)
    print(render_text(score))

    if args.out_json:
        Path(args.out_json).write_text(score.model_dump_json(indent=2), encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())
