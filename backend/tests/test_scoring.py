import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats import scoring
from resume_ats.rubric import find_terms


SAMPLE_RESUME = (
    "John Smith\n"
    "Email: john@x.com Phone: 555-123-4567\n"
    "Summary: Senior engineer with 5 years experience...\n"
    "Experience: Built systems at Acme.\n"
    "Education: BS Computer Science, MIT\n"
    "Skills: javascript, python, docker, aws, sql\n"
    "- Increased throughput by 40%\n"
    "- Reduced latency by 30%\n"
    "\n"
    "Projects: built a dashboard"
)

JOB_DESCRIPTION = (
    "We are hiring a python developer with strong docker and kubernetes "
    "experience building backend services"
)


class ResumeScoreTests(unittest.TestCase):
    def test_empty_text_scores_zero_with_every_suggestion(self):
        report = scoring.score_resume("")
        self.assertEqual(report.score, 0)
        self.assertEqual(report.strengths, [])
        self.assertEqual(len(report.suggestions), 8)
        self.assertEqual(report.keywords_found, [])

    def test_sample_resume(self):
        report = scoring.score_resume(SAMPLE_RESUME, "")
        # contact 10, summary 10, experience 15, education 10, skills 10,
        # verbs 0, achievements 5, formatting 10
        self.assertEqual(report.score, 70)
        self.assertIn("Contact information is complete", report.strengths)
        self.assertEqual(set(report.keywords_found), {"javascript", "python", "docker", "aws", "sql"})
        self.assertEqual(len(report.keywords_found), 5)
        self.assertEqual(scoring.grade_for(report.score), "Good")

    def test_scoring_is_deterministic(self):
        first = scoring.score_resume(SAMPLE_RESUME, JOB_DESCRIPTION)
        second = scoring.score_resume(SAMPLE_RESUME, JOB_DESCRIPTION)
        self.assertEqual(first, second)
        self.assertEqual(first.model_dump(by_alias=True), second.model_dump(by_alias=True))

    def test_garbled_input_stays_in_range(self):
        for text in ["\x00\x01\xff", "☃ ünïcödé ✓✓✓", "%%%%" * 500, "\n\n\n"]:
            report = scoring.score_resume(text, text)
            self.assertGreaterEqual(report.score, 0)
            self.assertLessEqual(report.score, 100)

    def test_keywords_are_not_duplicated(self):
        report = scoring.score_resume("python python Python PYTHON docker docker")
        self.assertEqual(report.keywords_found, ["python", "docker"])

    def test_keywords_need_word_boundaries(self):
        self.assertEqual(find_terms("javascript and mysql", ["java", "javascript", "sql"]), ["javascript"])
        self.assertEqual(find_terms("c# and c++ on node.js", ["c#", "c++", "node"]), ["c#", "c++", "node"])


class JobMatchGatingTests(unittest.TestCase):
    def test_missing_empty_and_short_job_description_are_equivalent(self):
        baseline = scoring.score_resume(SAMPLE_RESUME)
        self.assertEqual(scoring.score_resume(SAMPLE_RESUME, ""), baseline)
        self.assertEqual(scoring.score_resume(SAMPLE_RESUME, None), baseline)
        self.assertEqual(scoring.score_resume(SAMPLE_RESUME, "python developer"), baseline)

    def test_job_description_only_adds_job_match_points(self):
        text = "Python developer with docker and kubernetes experience building services"
        without = scoring.score_resume(text)
        with_jd = scoring.score_resume(text, JOB_DESCRIPTION)
        jd_check = scoring.check_job_match(text, JOB_DESCRIPTION)
        self.assertEqual(jd_check.points, 10)
        self.assertEqual(with_jd.score - without.score, jd_check.points)

    def test_job_match_check_is_omitted_when_gated(self):
        names = [r.name for r in scoring.run_checks(SAMPLE_RESUME)]
        self.assertNotIn("job_match", names)
        names = [r.name for r in scoring.run_checks(SAMPLE_RESUME, JOB_DESCRIPTION)]
        self.assertEqual(names[-1], "job_match")

    def test_ratio_thresholds(self):
        jd = "alpha bravo charl delta echoo"
        self.assertEqual(scoring.check_job_match("alpha bravo charl", jd).points, 10)
        self.assertEqual(scoring.check_job_match("alpha bravo", jd).points, 7)
        self.assertEqual(scoring.check_job_match("alpha", jd).points, 4)
        self.assertEqual(scoring.check_job_match("nothing here", jd).points, 0)

    def test_ratio_uses_substring_containment(self):
        self.assertEqual(scoring.job_match_ratio("I write javascript", "script script"), 1.0)
        self.assertEqual(scoring.job_match_ratio("anything", "tiny word list"), 0.0)


class RubricCheckTests(unittest.TestCase):
    def test_contact_is_monotonic(self):
        both = scoring.check_contact("me@example.com 555-123-4567")
        email_only = scoring.check_contact("me@example.com")
        phone_only = scoring.check_contact("(555) 123-4567")
        neither = scoring.check_contact("no way to reach me")
        self.assertEqual(both.points, 10)
        self.assertEqual(email_only.points, 5)
        self.assertEqual(phone_only.points, 5)
        self.assertEqual(neither.points, 0)
        self.assertIsNone(both.suggestion)
        self.assertIsNone(neither.strength)

    def test_summary_requires_keyword_and_length(self):
        long_text = "Professional summary: " + "x" * 100
        self.assertEqual(scoring.check_summary(long_text).points, 10)
        self.assertEqual(scoring.check_summary("Summary: short").points, 0)
        self.assertEqual(scoring.check_summary("y" * 200).points, 0)

    def test_section_checks(self):
        self.assertEqual(scoring.check_experience("Work History").points, 15)
        self.assertEqual(scoring.check_experience("hobbies").points, 0)
        self.assertEqual(scoring.check_education("State University").points, 10)
        self.assertEqual(scoring.check_education("hobbies").points, 0)

    def test_skills_tiers(self):
        self.assertEqual(scoring.check_skills("python java docker aws sql react node redis").points, 15)
        self.assertEqual(scoring.check_skills("python java docker aws sql").points, 10)
        self.assertEqual(scoring.check_skills("python java").points, 5)
        self.assertEqual(scoring.check_skills("python").points, 0)

    def test_partial_credit_gives_strength_and_suggestion(self):
        result = scoring.check_skills("python java docker aws sql")
        self.assertTrue(result.strength)
        self.assertTrue(result.suggestion)

    def test_action_verb_tiers(self):
        eight = "achieved improved managed created increased reduced delivered developed"
        self.assertEqual(scoring.check_action_verbs(eight).points, 10)
        self.assertEqual(scoring.check_action_verbs("achieved improved managed created").points, 5)
        self.assertEqual(scoring.check_action_verbs("achieved improved managed").points, 0)
        self.assertEqual(scoring.check_action_verbs("skilled and called").points, 0)

    def test_achievement_tiers(self):
        self.assertEqual(scoring.check_achievements("grew by 10% and saved $5").points, 10)
        self.assertEqual(scoring.check_achievements("served 100+ customers").points, 5)
        self.assertEqual(scoring.check_achievements("no numbers at all").points, 0)

    def test_non_ascii_digits_are_not_metrics_or_phones(self):
        self.assertEqual(scoring.check_achievements("growth \u0664\u0660% and \u0663\u0660%").points, 0)
        self.assertEqual(scoring.check_contact("\u0665\u0665\u0665-\u0661\u0662\u0663-\u0664\u0665\u0666\u0667").points, 0)

    def test_formatting_tiers(self):
        self.assertEqual(scoring.check_formatting("• one\n\n• two").points, 10)
        self.assertEqual(scoring.check_formatting("- one item").points, 5)
        self.assertEqual(scoring.check_formatting("block one\n\nblock two").points, 5)
        self.assertEqual(scoring.check_formatting("one plain line").points, 0)

    def test_build_report_clamps_total(self):
        results = [scoring.CheckResult("a", 80, 80), scoring.CheckResult("b", 50, 50)]
        self.assertEqual(scoring.build_report(results, []).score, 100)

    def test_grades(self):
        self.assertEqual(scoring.grade_for(95), "Excellent")
        self.assertEqual(scoring.grade_for(80), "Very Good")
        self.assertEqual(scoring.grade_for(60), "Fair")
        self.assertEqual(scoring.grade_for(0), "Needs Improvement")


if __name__ == "__main__":
    unittest.main()
