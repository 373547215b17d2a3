"""
Individual building: named instances, optionally typed against a class.
"""

import logging
from typing import List, Optional, Sequence

from rdflib import URIRef

from . import axioms
from .errors import NotFoundError

logger = logging.getLogger(__name__)


class IndividualBuilder:
    """Mints named individuals with labels."""

    def __init__(self, store, identifiers):
        self.store = store
        self.identifiers = identifiers

    def add_individual(self, name: str, type_iri: Optional[str] = None) -> URIRef:
        """Add an individual labelled `name`, typed by `type_iri` if given.

        Raises:
            NotFoundError: If type_iri is given but is not a class
        """
        type_class = self._require_type("add_individual", type_iri)
        individual_iri = self.identifiers.generate_unique_iri()
        self._declare(individual_iri, name, type_class)
        logger.info(f"Added individual '{name}' as {individual_iri}")
        return individual_iri

    def add_individuals(self, names: Sequence[str], type_iri: Optional[str] = None) -> List[URIRef]:
        """Add one individual per name, in order; the first failure propagates."""
        return [self.add_individual(name, type_iri) for name in names]

    def add_individual_by_iri(self, iri: str, label: str, type_iri: Optional[str] = None) -> URIRef:
        """Declare an individual under an externally supplied IRI (e.g. a GeoNames IRI)."""
        type_class = self._require_type("add_individual_by_iri", type_iri)
        individual_iri = URIRef(iri)
        self._declare(individual_iri, label, type_class)
        logger.debug(f"Added individual '{label}' as {individual_iri}")
        return individual_iri

    def _declare(self, individual_iri: URIRef, label: str, type_class: Optional[URIRef]):
        if type_class is not None:
            self.store.add_axiom(axioms.class_assertion(type_class, individual_iri))
        else:
            self.store.add_axiom(axioms.declare_individual(individual_iri))
        self.store.add_axiom(axioms.label(individual_iri, label))

    def _require_type(self, operation: str, type_iri: Optional[str]) -> Optional[URIRef]:
        if type_iri is None:
            return None
        type_class = URIRef(type_iri)
        if not self.store.is_class(type_class):
            raise NotFoundError(operation, type_iri)
        return type_class
