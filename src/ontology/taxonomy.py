"""
Taxonomy building: root classes, subclasses and bulk subclass loading.
"""

import logging
from typing import List, Sequence

from rdflib import URIRef

from . import axioms
from .domain import EntityKind
from .errors import NotFoundError

logger = logging.getLogger(__name__)


class TaxonomyBuilder:
    """Adds classes and subclass relations, each class under a freshly minted IRI."""

    def __init__(self, store, identifiers):
        self.store = store
        self.identifiers = identifiers

    def add_class(self, name: str) -> URIRef:
        """Add a root class labelled with the given name."""
        class_iri = self.identifiers.generate_unique_iri()
        self.store.add_axiom(axioms.declare_class(class_iri))
        self.store.add_axiom(axioms.label(class_iri, name))
        logger.info(f"Added class '{name}' as {class_iri}")
        return class_iri

    def add_subclass(self, parent_iri: str, name: str) -> URIRef:
        """Add a new class as a subclass of an existing one.

        Args:
            parent_iri: IRI of the parent class
            name: Label of the new class

        Returns:
            IRI of the new class

        Raises:
            NotFoundError: If the parent is not a class of this ontology
        """
        parent = URIRef(parent_iri)
        if not self.store.is_class(parent):
            raise NotFoundError("add_subclass", parent_iri)

        class_iri = self.identifiers.generate_unique_iri()
        self.store.add_axiom(axioms.subclass_of(class_iri, parent))
        self.store.add_axiom(axioms.label(class_iri, name))
        logger.info(f"Added subclass '{name}' of {parent} as {class_iri}")
        return class_iri

    def add_subclasses(self, parent_iri: str, names: Sequence[str]) -> List[URIRef]:
        """Add one subclass per name, in order.

        The first failure propagates; classes added before it are kept.
        """
        return [self.add_subclass(parent_iri, name) for name in names]

    def add_subclasses_with_definitions(self, parent_iri: str, names: Sequence[str],
                                        definitions: Sequence[str]) -> List[URIRef]:
        """Add subclasses and give each its skos:definition (names[i] <-> definitions[i])."""
        if len(names) != len(definitions):
            raise ValueError(
                f"Got {len(names)} class names but {len(definitions)} definitions"
            )
        class_iris = []
        for name, definition in zip(names, definitions):
            class_iri = self.add_subclass(parent_iri, name)
            self.store.add_axiom(axioms.skos_definition(class_iri, definition))
            class_iris.append(class_iri)
        return class_iris

    def set_type(self, entity_iri: str, type_iri: str) -> None:
        """Make an existing entity an instance (individual) or subclass (class) of a class."""
        type_class = URIRef(type_iri)
        if not self.store.is_class(type_class):
            raise NotFoundError("set_type", type_iri)

        entity = URIRef(entity_iri)
        kind = self.store.kind_of(entity)
        if kind is EntityKind.INDIVIDUAL:
            self.store.add_axiom(axioms.class_assertion(type_class, entity))
        elif kind is EntityKind.CLASS:
            self.store.add_axiom(axioms.subclass_of(entity, type_class))
        else:
            raise NotFoundError("set_type", entity_iri, expected="class or individual")
