"""Concept lookup provider."""

import logging

from sqlalchemy.orm import Session

from raccount.database.base import BaseDAO, storage_guard
from raccount.database.mappers import concept_to_domain
from raccount.database.models import Concept
from raccount.domain.entities import Concept as DomainConcept
from raccount.domain.errors import NotFoundError, concept_not_found

logger = logging.getLogger(__name__)


class ConceptDAO(BaseDAO):
    """Data access for spending concepts."""

    def insert(self, session: Session, name: str) -> int:
        """Create a new concept. Returns concept ID."""
        concept = Concept(name=name)
        with storage_guard(session, f"insert concept '{name}'", commit=True):
            session.add(concept)
            session.flush()
            concept_id = concept.id
        logger.info("Inserted concept %s (%s)", concept_id, name)
        return concept_id

    def find(self, session: Session, concept_id: int) -> DomainConcept:
        """Get concept by ID."""
        with storage_guard(session, f"load concept {concept_id}"):
            concept = session.query(Concept).filter(Concept.id == concept_id).first()
        if concept is None:
            raise NotFoundError(concept_not_found(concept_id))
        return concept_to_domain(concept)

    def list_all(self, session: Session) -> list[DomainConcept]:
        """List all concepts ordered by ID."""
        with storage_guard(session, "list concepts"):
            concepts = session.query(Concept).order_by(Concept.id).all()
        return [concept_to_domain(c) for c in concepts]

    def count(self, session: Session) -> int:
        with storage_guard(session, "count concepts"):
            return session.query(Concept).count()
