"""
Human-facing annotations: RDFS labels, SKOS definitions and alternative labels.
"""

import logging
import unicodedata

from rdflib import URIRef

from . import axioms
from .errors import NotFoundError

logger = logging.getLogger(__name__)


# Letters whose stroke is not a combining mark, so NFD leaves them intact
STROKED_LETTERS = str.maketrans({
    "Ł": "L", "ł": "l",
    "Ø": "O", "ø": "o",
    "Đ": "D", "đ": "d",
})


def strip_accents(text: str) -> str:
    """Remove diacritics, e.g. "Café" -> "Cafe", "Łódź" -> "Lodz"."""
    decomposed = unicodedata.normalize("NFD", text.translate(STROKED_LETTERS))
    return "".join(c for c in decomposed if not unicodedata.combining(c))


class AnnotationBuilder:
    """Attaches annotations to entities that already exist in the ontology."""

    def __init__(self, store):
        self.store = store

    def label_entity(self, iri: str, text: str, allow_accents: bool = True) -> None:
        """Attach an rdfs:label to any declared entity.

        Args:
            iri: IRI of a class, individual or property
            text: Label text
            allow_accents: If False, diacritics are stripped before storing
        """
        entity_iri = URIRef(iri)
        if not self.store.is_declared(entity_iri):
            raise NotFoundError("label_entity", iri, expected="entity")

        label = text if allow_accents else strip_accents(text)
        self.store.add_axiom(axioms.label(entity_iri, label))

    def annotate_class(self, iri: str, text: str) -> None:
        """Attach an rdfs:label to a class."""
        class_iri = self._require_class("annotate_class", iri)
        self.store.add_axiom(axioms.label(class_iri, text))

    def add_skos_definition(self, iri: str, definition: str) -> None:
        """Attach a skos:definition to a class."""
        class_iri = self._require_class("add_skos_definition", iri)
        self.store.add_axiom(axioms.skos_definition(class_iri, definition))

    def add_skos_alt_label(self, iri: str, alt_label: str) -> None:
        """Attach a skos:altLabel to a class."""
        class_iri = self._require_class("add_skos_alt_label", iri)
        self.store.add_axiom(axioms.skos_alt_label(class_iri, alt_label))

    def add_annotation_property(self, iri: str, label: str) -> URIRef:
        """Declare a new annotation property and label it."""
        property_iri = URIRef(iri)
        self.store.add_axiom(axioms.declare_annotation_property(property_iri))
        self.store.add_axiom(axioms.label(property_iri, label))
        logger.info(f"Added annotation property {property_iri} ({label})")
        return property_iri

    def _require_class(self, operation: str, iri: str) -> URIRef:
        class_iri = URIRef(iri)
        if not self.store.is_class(class_iri):
            raise NotFoundError(operation, iri)
        return class_iri
