"""
test_prerequisites.py — choice requirement evaluation
"""

from prerequisites import Requirements, evaluate_requirements
from stats import GameStats


STATS = GameStats(members=48, cohesion=30, resources=35, influence=20)


class TestRequirements:
    def test_empty_dict_means_no_requirements(self):
        assert Requirements.from_dict({}) is None
        assert Requirements.from_dict(None) is None

    def test_referenced_tags(self):
        req = Requirements.from_dict({"required_tags": ["a"], "forbidden_tags": ["b"]})
        assert req.referenced_tags == ("a", "b")


class TestEvaluateRequirements:
    def test_no_requirements_met(self):
        check = evaluate_requirements(None, STATS, set())
        assert check.met
        assert check.unmet == []

    def test_threshold_unmet_reports_current_value(self):
        check = evaluate_requirements(Requirements(min_cohesion=40), STATS, set())
        assert not check.met
        assert check.unmet == ["Requires Cohesion 40 (currently 30)"]

    def test_threshold_met_exactly(self):
        assert evaluate_requirements(Requirements(min_resources=35), STATS, set()).met

    def test_missing_required_tag(self):
        check = evaluate_requirements(Requirements(required_tags=("merchant_patrons",)), STATS, set())
        assert check.unmet == ["Requires: merchant patrons"]

    def test_required_tag_present(self):
        req = Requirements(required_tags=("merchant_patrons",))
        assert evaluate_requirements(req, STATS, {"merchant_patrons"}).met

    def test_forbidden_tag_present(self):
        req = Requirements(forbidden_tags=("imperial_patronage",))
        check = evaluate_requirements(req, STATS, {"imperial_patronage"})
        assert check.unmet == ["Unavailable after: imperial patronage"]

    def test_every_failed_clause_is_listed(self):
        req = Requirements(min_cohesion=40, min_influence=50, required_tags=("confessors",))
        check = evaluate_requirements(req, STATS, set())
        assert len(check.unmet) == 3
