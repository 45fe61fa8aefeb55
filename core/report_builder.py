from datetime import date
from typing import List

from core.config_loader import ScoringConfig
from core.scorer.models import ATSScoreResult
from etl.resume.models import ChronologyReport

PROFICIENCY_LEVELS = ("expert", "intermediate", "beginner")
KEY_SKILL_COUNT = 5
SUGGESTION_THRESHOLD = 70


def _month(d: date) -> str:
    return d.strftime("%b %Y")


def _join(items: List[str], empty: str = "None found") -> str:
    return ", ".join(items) if items else empty


class ReportBuilder:
    """Render an ATSScoreResult as console text."""

    @staticmethod
    def build_score_section(result: ATSScoreResult, config: ScoringConfig = None) -> List[str]:
        """Sub-score lines labelled with the weights they carry in the final score."""
        w = (config or ScoringConfig()).weights
        rows = [
            ("Semantic Similarity", w.semantic, result.semantic_similarity),
            ("Keyword Match", w.keyword, result.keyword_match),
            ("Technical Skills Match", w.skills, result.skills_match),
            ("Education Requirements", w.education, result.education_score),
            ("Experience Level", w.experience, result.experience_score),
            ("Soft Skills", w.soft_skills, result.soft_skills_score),
            ("Position Relevance", w.title, result.title_score),
        ]
        lines = ["ATS ANALYSIS RESULTS", "=============================="]
        lines += [f"{label} ({weight:.0%}): {score:.2f}%" for label, weight, score in rows]
        lines += ["==============================", f"OVERALL ATS SCORE: {result.final_score:.2f}%"]
        return lines

    @staticmethod
    def build_skills_section(result: ATSScoreResult, config: ScoringConfig = None) -> List[str]:
        if not result.jd_skills:
            return []
        config = config or ScoringConfig()

        lines = [
            "",
            "Technical Skills in Job Description:",
            ", ".join(result.jd_skills),
            "",
            "Matched Technical Skills in Resume:",
            _join(result.matched_skills),
        ]

        if result.missing_skills:
            lines += ["", "Missing Technical Skills (consider adding these):", ", ".join(result.missing_skills)]

        lines += ["", "Skill Proficiency Analysis:"]
        for level in PROFICIENCY_LEVELS:
            skills = result.skills_at_level(level)
            if skills:
                lines += ["", f"{level.capitalize()}-level Skills:"]
                for skill in skills:
                    lines.append(f"  - {skill} ({result.skill_proficiencies[skill].evidence[0]})")

        assessed = [s for s in result.matched_skills if s in result.skill_proficiencies]
        if assessed:
            counts = {level: len(result.skills_at_level(level, assessed)) for level in PROFICIENCY_LEVELS}
            total = len(assessed)
            lines += ["", "Proficiency Distribution for Required Skills:"]
            for level in PROFICIENCY_LEVELS:
                lines.append(f"  {level.capitalize()}: {counts[level]} ({round(counts[level] / total * 100)}%)")
            match = sum(counts[level] * config.level_credit.get(level, 0.0) for level in PROFICIENCY_LEVELS) / total
            lines.append(f"  Overall Proficiency Match: {match * 100:.2f}%")

        weak_key_skills = result.skills_at_level("beginner", result.matched_skills[:KEY_SKILL_COUNT])
        if weak_key_skills:
            lines += ["", "Consider strengthening these key skills required by the job:"]
            lines += [f"  - {skill} (currently at beginner level)" for skill in weak_key_skills]

        return lines

    @staticmethod
    def build_education_section(result: ATSScoreResult) -> List[str]:
        lines = ["", "Education Analysis:"]
        jd, resume = result.jd_education, result.resume_education

        if jd.has_degree:
            lines.append(f"Required Degree(s): {', '.join(jd.degree_levels)}")
            lines.append(f"Required Field(s): {_join(jd.fields_of_study, 'Not specified')}")
        else:
            lines.append("No specific degree requirements mentioned.")

        lines.append("Candidate Education:")
        if resume.has_degree:
            lines.append(f"Degree(s): {', '.join(resume.degree_levels)}")
            lines.append(f"Field(s): {_join(resume.fields_of_study, 'Not specified')}")
        else:
            lines.append("No degree information found in resume.")

        return lines

    @staticmethod
    def build_experience_section(result: ATSScoreResult) -> List[str]:
        required = result.required_experience_years
        candidate = result.candidate_experience_years
        return [
            "",
            "Experience Analysis:",
            f"Required Years: {f'{required}+ years' if required > 0 else 'Not specified'}",
            f"Candidate Years: {f'{candidate} years' if candidate > 0 else 'Not specified'}",
        ]

    @staticmethod
    def build_chronology_section(report: ChronologyReport) -> List[str]:
        lines = [
            "",
            "Career Chronology Analysis:",
            f"Total Calculated Experience: {report.total_experience_years} years",
        ]

        if report.career_gaps:
            lines.append(f"Career Gaps: {len(report.career_gaps)} gaps identified")
            for i, gap in enumerate(report.career_gaps, 1):
                lines.append(
                    f"  Gap {i}: {_month(gap.start_date)} to {_month(gap.end_date)} ({gap.duration_months} months)"
                )
        else:
            lines.append("Career Gaps: None identified")

        progression = report.career_progression
        lines.append(f"Career Progression: {progression.pattern}")
        lines.append(f"Average Job Duration: {progression.average_job_duration / 12:.1f} years")

        if report.employment_periods:
            lines += ["", "Employment History (chronological):"]
            for i, period in enumerate(sorted(report.employment_periods, key=lambda p: p.start_date), 1):
                company = f" at {period.company}" if period.company else ""
                lines.append(f"  Position {i}: {period.job_title or 'Unknown position'}{company}")
                lines.append(
                    f"    Duration: {_month(period.start_date)} to {_month(period.end_date)} "
                    f"({period.duration_months / 12:.1f} years)"
                )

        return lines

    @staticmethod
    def build_soft_skills_section(result: ATSScoreResult) -> List[str]:
        if not result.jd_soft_skills:
            return []

        lines = [
            "",
            "Soft Skills in Job Description:",
            ", ".join(result.jd_soft_skills),
            "",
            "Matched Soft Skills in Resume:",
            _join(result.matched_soft_skills),
        ]
        if result.missing_soft_skills:
            lines += ["", "Missing Soft Skills (consider highlighting these):", ", ".join(result.missing_soft_skills)]
        return lines

    @staticmethod
    def build_feedback(result: ATSScoreResult) -> List[str]:
        """Score-tiered advice followed by career-history and proficiency suggestions."""
        lines = ["", "FEEDBACK:"]
        score = result.final_score
        beginner_matched = result.skills_at_level("beginner", result.matched_skills)

        if score >= 80:
            lines.append("Strong match! Your resume is well-aligned with the job requirements.")
            if result.jd_skills and result.matched_skills and (result.missing_skills or beginner_matched):
                lines.append("Technical Skills Recommendations:")
                if result.missing_skills:
                    lines.append(f"- Add these missing skills to your resume: {', '.join(result.missing_skills)}")
                if beginner_matched:
                    lines.append(f"- Consider improving proficiency in: {', '.join(beginner_matched)}")
                    lines.append(
                        "  Highlight projects or training that demonstrate higher expertise with these technologies"
                    )
        elif score >= 65:
            lines.append("Good match. With a few targeted improvements, your resume would be well-positioned:")
            if result.skills_match < SUGGESTION_THRESHOLD:
                lines.append("- Focus on adding the missing technical skills")
            if result.education_score < SUGGESTION_THRESHOLD:
                lines.append("- Emphasize your educational background if applicable")
            if result.experience_score < SUGGESTION_THRESHOLD:
                lines.append("- Highlight experiences that demonstrate required years of expertise")
            if result.soft_skills_score < SUGGESTION_THRESHOLD:
                lines.append("- Include more of the soft skills mentioned in the job description")
            if beginner_matched:
                lines.append(f"- Improve your proficiency level in: {', '.join(beginner_matched)}")
        elif score >= 50:
            lines += [
                "Moderate match. Your resume needs significant tailoring for this position:",
                "- Add missing technical skills and highlight relevant experience",
                "- Ensure your education section clearly shows your qualifications",
                "- Use more keywords from the job description throughout your resume",
                "- Focus on demonstrating higher proficiency in key skills through specific accomplishments",
            ]
        else:
            lines += [
                "Low match. Consider if this role is aligned with your skills and experience:",
                "- This position may require skills you haven't developed yet",
                "- If pursuing this type of role, focus on acquiring the missing technical skills",
                "- Consider roles that better match your current profile while you develop these skills",
            ]

        lines += ReportBuilder.build_career_suggestions(result.chronology)
        lines += ReportBuilder.build_proficiency_suggestions(result)
        return lines

    @staticmethod
    def build_career_suggestions(report: ChronologyReport) -> List[str]:
        progression = report.career_progression
        if not report.career_gaps and not progression.frequent_changes:
            return []

        lines = ["", "Career History Suggestions:"]
        if report.career_gaps:
            lines.append("- Consider addressing employment gaps in your resume or cover letter")
            lines.append("  Explain what you did during these periods (education, freelancing, personal projects)")
        if progression.frequent_changes:
            lines.append("- Your resume shows frequent job changes which some employers may view cautiously")
            lines.append("  Focus on accomplishments and growth in each role to justify transitions")
        if not progression.has_progression and len(report.employment_periods) > 2:
            lines.append("- Your career path doesn't show clear progression in job titles/responsibilities")
            lines.append("  Highlight increasing responsibilities and achievements even if titles didn't change")
        return lines

    @staticmethod
    def build_proficiency_suggestions(result: ATSScoreResult) -> List[str]:
        assessed = [s for s in result.matched_skills if s in result.skill_proficiencies]
        if not assessed:
            return []

        strong = [s for s in assessed if result.skill_proficiencies[s].level in ("expert", "intermediate")]
        if len(strong) / len(assessed) * 100 >= SUGGESTION_THRESHOLD:
            return []

        return [
            "",
            "Proficiency Enhancement Suggestions:",
            "- Your resume indicates skills match, but proficiency levels could be improved",
            "- For each key skill, add accomplishments that demonstrate your expertise",
            "- Consider including metrics, projects scope, and technical complexity",
        ]

    @staticmethod
    def build_report(result: ATSScoreResult, config: ScoringConfig = None) -> str:
        """Full console report; weights and proficiency credits come from config."""
        lines = ReportBuilder.build_score_section(result, config)
        lines += ReportBuilder.build_skills_section(result, config)
        lines += ReportBuilder.build_education_section(result)
        lines += ReportBuilder.build_experience_section(result)
        lines += ReportBuilder.build_chronology_section(result.chronology)
        lines += ReportBuilder.build_soft_skills_section(result)
        lines += ReportBuilder.build_feedback(result)
        return "\n".join(lines)
