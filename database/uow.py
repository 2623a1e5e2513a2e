import contextlib
import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from database.database import SessionLocal
from database.repositories import ConsultantRepository, ProjectRepository, EngagementRepository

logger = logging.getLogger(__name__)


@dataclass
class MatchingRepositories:
    """Repositories sharing one Session, so one commit covers all of them."""
    session: Session
    consultants: ConsultantRepository
    projects: ProjectRepository
    engagements: EngagementRepository

    @classmethod
    def for_session(cls, session: Session) -> "MatchingRepositories":
        return cls(
            session=session,
            consultants=ConsultantRepository(session),
            projects=ProjectRepository(session),
            engagements=EngagementRepository(session),
        )


@contextlib.contextmanager
def matching_uow(session_factory=SessionLocal):
    """Per-unit-of-work transaction scope.

    Yields MatchingRepositories bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with matching_uow() as repos:
            records = repos.consultants.get_candidate_records(role="architect")
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = session_factory()
    try:
        yield MatchingRepositories.for_session(session)
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
