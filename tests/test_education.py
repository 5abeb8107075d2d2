import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.features.education import get_education_level  # noqa: E402
from app.schemas.ats import ResumeContent  # noqa: E402
from app.scoring.dimensions import score_education  # noqa: E402


class EducationLevelTests(unittest.TestCase):
    def test_full_keywords(self):
        self.assertEqual(get_education_level("High School Diploma"), 1)
        self.assertEqual(get_education_level("Associate Degree in Nursing"), 2)
        self.assertEqual(get_education_level("Bachelor's degree required"), 3)
        self.assertEqual(get_education_level("Master of Science"), 4)
        self.assertEqual(get_education_level("MBA"), 4)
        self.assertEqual(get_education_level("PhD in Physics"), 5)
        self.assertEqual(get_education_level("Ph.D. in Physics"), 5)
        self.assertEqual(get_education_level("Doctorate"), 5)

    def test_highest_level_wins(self):
        self.assertEqual(get_education_level("Bachelor's required, Master's preferred"), 4)

    def test_standalone_abbreviations(self):
        self.assertEqual(get_education_level("BS Computer Science"), 3)
        self.assertEqual(get_education_level("B.A. in History"), 3)
        self.assertEqual(get_education_level("M.S. Statistics"), 4)
        self.assertEqual(get_education_level("MS, Data Science"), 4)

    def test_abbreviations_inside_words_do_not_count(self):
        self.assertEqual(get_education_level("Jobs in bash and email marketing"), 0)

    def test_nothing_found(self):
        self.assertEqual(get_education_level("We need a Python developer"), 0)
        self.assertEqual(get_education_level(""), 0)
        self.assertEqual(get_education_level(None), 0)


class EducationScoreTests(unittest.TestCase):
    MASTERS_JD = "Master's degree in Computer Science preferred"

    @staticmethod
    def _resume(*degrees):
        return ResumeContent(
            education=[{"degree": degree, "field": field, "institution": "State University"} for degree, field in degrees]
        )

    def test_unspecified_requirement_meets(self):
        result = score_education(self._resume(), "We need a Python developer")
        self.assertEqual((result.status, result.score), ("meets", 10))
        self.assertEqual(result.details, "Education requirements not specified in job description")

    def test_exceeds(self):
        result = score_education(self._resume(("PhD", "Physics")), self.MASTERS_JD)
        self.assertEqual((result.status, result.score), ("exceeds", 10))

    def test_meets(self):
        result = score_education(self._resume(("M.S.", "Statistics")), self.MASTERS_JD)
        self.assertEqual((result.status, result.score), ("meets", 10))
        self.assertEqual(result.details, "Your education meets or exceeds requirements")

    def test_partial_when_some_education_is_below(self):
        result = score_education(self._resume(("Bachelor of Science", "Computer Science")), self.MASTERS_JD)
        self.assertEqual((result.status, result.score), ("partial", 5))

    def test_unrecognized_degree_is_missing_not_partial(self):
        result = score_education(self._resume(("Certificate", "Design")), self.MASTERS_JD)
        self.assertEqual((result.status, result.score), ("missing", 3))

    def test_no_education_is_missing(self):
        result = score_education(self._resume(), "Bachelor's degree required")
        self.assertEqual((result.status, result.score), ("missing", 3))
        self.assertEqual(result.details, "Add your education credentials")

    def test_best_entry_counts(self):
        result = score_education(
            self._resume(("High School Diploma", None), ("MBA", "Finance")),
            self.MASTERS_JD,
        )
        self.assertEqual(result.status, "meets")

    def test_institution_is_ignored(self):
        resume = ResumeContent(education=[{"degree": "Diploma", "institution": "Master's Academy"}])
        self.assertEqual(score_education(resume, self.MASTERS_JD).status, "missing")


if __name__ == "__main__":
    unittest.main()
