"""Unit tests for the recommendation filter."""
import pytest

from learning.errors import InvalidArgument
from learning.models import ModuleCatalogEntry
from learning.recommend import recommend


@pytest.mark.unit
class TestRecommend:
    def test_filters_by_interest(self):
        a = ModuleCatalogEntry("A", "A", "", 10, "science")
        b = ModuleCatalogEntry("B", "B", "", 10, "art")
        assert recommend([a, b], ["science"], [], limit=5) == [a]

    def test_no_interests_means_nothing(self, catalog):
        assert recommend(catalog, [], []) == []

    def test_excludes_completed_and_keeps_catalog_order(self, catalog):
        out = recommend(catalog, ["Technology", "Science"], ["tech-101"])
        assert [m.module_id for m in out] == ["sci-101", "tech-102", "sci-102", "tech-103"]

    def test_truncates_to_limit(self, catalog):
        out = recommend(catalog, ["Technology", "Science", "Art"], [], limit=2)
        assert [m.module_id for m in out] == ["tech-101", "sci-101"]

    def test_zero_limit(self, catalog):
        assert recommend(catalog, ["Technology"], [], limit=0) == []

    def test_negative_limit_rejected(self, catalog):
        with pytest.raises(InvalidArgument):
            recommend(catalog, ["Technology"], [], limit=-1)

    def test_accepts_generator_catalog(self, catalog):
        out = recommend((m for m in catalog), ["Art"], [])
        assert [m.module_id for m in out] == ["art-101"]
