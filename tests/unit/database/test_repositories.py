#!/usr/bin/env python3
"""
Repository tests against an in-memory SQLite database.
"""

import pytest

from database.repositories import ConsultantRepository, ProjectRepository, EngagementRepository
from database.uow import MatchingRepositories, matching_uow
from tests import consultant_record, make_test_session_factory

pytestmark = pytest.mark.db


def _scores(combined=96, **overrides):
    scores = {
        "discipline": "architect",
        "client_fit": 95.65,
        "project_fit": 96.11,
        "combined_score": combined,
        "tier": "top_match",
        "breakdown": [{"dimension": "budget", "raw": 25}],
    }
    scores.update(overrides)
    return scores


class TestConsultantRepository:

    def test_create_and_get(self, db_session):
        repo = ConsultantRepository(db_session)
        created = repo.create_consultant(consultant_record())

        fetched = repo.get_by_id(created.id)
        assert fetched is not None
        assert fetched.firm_name == "Atelier Pacific"
        assert fetched.specialties == ["Contemporary", "Minimalist"]
        # The fixture id is not a column value; the database assigns a UUID
        assert str(fetched.id) != "c-001"

    def test_get_by_id_accepts_strings_and_garbage(self, db_session):
        repo = ConsultantRepository(db_session)
        created = repo.create_consultant(consultant_record())

        assert repo.get_by_id(str(created.id)) is created
        assert repo.get_by_id("not-a-uuid") is None
        assert repo.get_by_id(None) is None

    def test_list_filters_role_and_archived(self, db_session):
        repo = ConsultantRepository(db_session)
        repo.create_consultant(consultant_record(firm_name="B Architects"))
        designer = repo.create_consultant(consultant_record(firm_name="A Interiors", role="interior_designer"))
        archived = repo.create_consultant(consultant_record(firm_name="C Architects"))
        repo.archive_consultant(archived)

        assert [c.firm_name for c in repo.list_consultants()] == ["A Interiors", "B Architects"]
        assert [c.firm_name for c in repo.list_consultants(role="architect")] == ["B Architects"]
        assert len(repo.list_consultants(include_archived=True)) == 3
        assert [c.id for c in repo.list_consultants(limit=1)] == [designer.id]

    def test_archive_is_soft(self, db_session):
        repo = ConsultantRepository(db_session)
        consultant = repo.archive_consultant(repo.create_consultant(consultant_record()))

        assert consultant.status == "archived"
        assert consultant.active is False
        assert repo.get_by_id(consultant.id) is not None

    def test_candidate_records_include_archived_for_the_scorer(self, db_session):
        repo = ConsultantRepository(db_session)
        repo.archive_consultant(repo.create_consultant(consultant_record()))

        records = repo.get_candidate_records()
        assert len(records) == 1
        assert records[0]["status"] == "archived"
        assert isinstance(records[0]["id"], str)

    def test_update_ignores_unknown_fields(self, db_session):
        repo = ConsultantRepository(db_session)
        consultant = repo.create_consultant(consultant_record())
        original_id = consultant.id

        repo.update_consultant(consultant, {"avg_rating": 4.9, "id": "c-999", "bogus": 1})
        assert consultant.avg_rating == 4.9
        assert consultant.id == original_id


class TestProjectRepository:

    def test_save_and_replace_document(self, db_session):
        repo = ProjectRepository(db_session)
        repo.save_document("malibu-residence", "kyc", {"principal": {"v": 1}})
        repo.save_document("malibu-residence", "kyc", {"principal": {"v": 2}})

        assert repo.get_document("malibu-residence", "kyc") == {"principal": {"v": 2}}
        assert repo.get_document("malibu-residence", "fyi") is None

    def test_documents_and_slugs(self, db_session):
        repo = ProjectRepository(db_session)
        repo.save_document("palm-beach", "kyc", {"a": 1})
        repo.save_document("palm-beach", "fyi", {"b": 2})
        repo.save_document("aspen-lodge", "kyc", {})

        assert repo.get_documents("palm-beach") == {"kyc": {"a": 1}, "fyi": {"b": 2}}
        assert repo.list_slugs() == ["aspen-lodge", "palm-beach"]
        assert repo.project_exists("aspen-lodge")
        assert not repo.project_exists("nowhere")


class TestEngagementRepository:

    def test_save_and_refresh(self, db_session):
        consultant = ConsultantRepository(db_session).create_consultant(consultant_record())
        repo = EngagementRepository(db_session)

        first = repo.save_engagement("malibu-residence", consultant.id, _scores(notes="Strong portfolio"))
        refreshed = repo.save_engagement("malibu-residence", str(consultant.id), _scores(combined=90, tier="top_match"))

        assert refreshed.id == first.id
        assert refreshed.combined_score == 90
        assert refreshed.notes == "Strong portfolio"
        assert len(repo.get_engagements_for_project("malibu-residence")) == 1

    def test_listing_order_and_status(self, db_session):
        consultants = ConsultantRepository(db_session)
        low = consultants.create_consultant(consultant_record(firm_name="Low"))
        high = consultants.create_consultant(consultant_record(firm_name="High"))
        repo = EngagementRepository(db_session)
        repo.save_engagement("p", low.id, _scores(combined=55, tier="consider"))
        repo.save_engagement("p", high.id, _scores(combined=88))

        engagements = repo.get_engagements_for_project("p")
        assert [e.consultant_id for e in engagements] == [high.id, low.id]
        assert repo.get_engagements_for_project("p", status="declined") == []
        assert repo.get_engagement("p", "bad-id") is None


class TestMatchingUnitOfWork:

    def test_commit_on_success(self):
        engine, session_factory = make_test_session_factory()
        with matching_uow(session_factory) as repos:
            assert isinstance(repos, MatchingRepositories)
            repos.projects.save_document("malibu-residence", "kyc", {"x": 1})

        with matching_uow(session_factory) as repos:
            assert repos.projects.get_document("malibu-residence", "kyc") == {"x": 1}
        engine.dispose()

    def test_rollback_on_error(self):
        engine, session_factory = make_test_session_factory()
        with pytest.raises(RuntimeError):
            with matching_uow(session_factory) as repos:
                repos.projects.save_document("malibu-residence", "kyc", {"x": 1})
                raise RuntimeError("boom")

        with matching_uow(session_factory) as repos:
            assert not repos.projects.project_exists("malibu-residence")
        engine.dispose()
