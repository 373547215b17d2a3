"""
Object and data properties between existing entities.

`add_object_property` decides from the kinds of its endpoints whether to
assert an instance-level fact (two individuals) or to design the schema
(two classes: domain, range and an existential restriction per domain
class). Connecting an individual with a class is rejected.
"""

import logging
from datetime import date, datetime
from typing import Iterable, List, Union

from rdflib import Literal, URIRef
from rdflib.namespace import XSD

from . import axioms
from .domain import EntityKind
from .errors import NotFoundError, SemanticMismatchError

logger = logging.getLogger(__name__)

# Datatypes accepted by name as data property ranges
DATATYPES = {
    "date": XSD.date,
    "string": XSD.string,
}


def get_datatype(name: Union[str, URIRef]) -> URIRef:
    """Resolve a datatype name ("date", "string") or pass an XSD IRI through."""
    if isinstance(name, URIRef):
        return name
    datatype = DATATYPES.get(name.strip().lower())
    if datatype is None:
        raise ValueError(f"Unsupported datatype '{name}'. Must be one of: {', '.join(DATATYPES)}")
    return datatype


def to_literal(value) -> Literal:
    """Wrap a plain Python value as an RDF literal."""
    if isinstance(value, Literal):
        return value
    if isinstance(value, date) and not isinstance(value, datetime):
        return Literal(value, datatype=XSD.date)
    return Literal(value)


class RelationBuilder:
    """Creates object and data properties and the axioms connecting entities through them."""

    def __init__(self, store, identifiers):
        self.store = store
        self.identifiers = identifiers

    # Composite operations

    def add_object_property(self, name: str, subject_iri: str, object_iri: str) -> URIRef:
        """Create an object property relating two existing entities.

        Both individuals: one assertion `subject property object`.
        Both classes: domain = subject, range = object and
        `subject SubClassOf property some object`.

        Raises:
            NotFoundError: If either endpoint is not a class or individual
            SemanticMismatchError: If one endpoint is an individual and the other a class
        """
        subject, obj = URIRef(subject_iri), URIRef(object_iri)
        subject_kind = self.store.kind_of(subject)
        object_kind = self.store.kind_of(obj)

        for iri, kind in ((subject, subject_kind), (obj, object_kind)):
            if kind is EntityKind.UNKNOWN:
                raise NotFoundError("add_object_property", iri, expected="class or individual")
        if subject_kind is not object_kind:
            raise SemanticMismatchError("add_object_property", subject, obj,
                                        subject_kind.value, object_kind.value)

        property_iri = self._new_object_property(name)
        if subject_kind is EntityKind.INDIVIDUAL:
            self.assert_object_property_assertion(subject, obj, property_iri)
        else:
            self._add_object_domain_range(property_iri, [subject], obj)

        logger.info(f"Added object property '{name}' as {property_iri} "
                    f"between {subject_kind.value} {subject} and {obj}")
        return property_iri

    def add_object_property_with_domain_range(self, name: str,
                                              domain_iris: Union[str, Iterable[str]],
                                              range_iri: str) -> URIRef:
        """Create an object property with a domain (one class or a union) and a range class.

        One existential restriction is asserted for every domain class.
        """
        domains = self._require_classes("add_object_property_with_domain_range", domain_iris)
        range_class = self._require_class("add_object_property_with_domain_range", range_iri)

        property_iri = self._new_object_property(name)
        self._add_object_domain_range(property_iri, domains, range_class)
        logger.info(f"Added object property '{name}' as {property_iri} "
                    f"({len(domains)} domain classes -> {range_class})")
        return property_iri

    def add_data_property(self, name: str, subject_iri: str, value) -> URIRef:
        """Create a data property and give the subject a literal value for it.

        An individual subject gets a data property assertion; for a class
        subject every instance gets the value (a has-value restriction).
        """
        subject = URIRef(subject_iri)
        kind = self.store.kind_of(subject)
        if kind is EntityKind.UNKNOWN:
            raise NotFoundError("add_data_property", subject_iri, expected="class or individual")

        literal = to_literal(value)
        property_iri = self._new_data_property(name)
        if kind is EntityKind.INDIVIDUAL:
            self.assert_data_property_assertion(subject, literal, property_iri)
        else:
            self.assert_data_property_axiom(subject, literal, property_iri)

        logger.info(f"Added data property '{name}' as {property_iri} on {kind.value} {subject}")
        return property_iri

    def add_data_property_with_range(self, name: str,
                                     domain_iris: Union[str, Iterable[str]],
                                     datatype: Union[str, URIRef]) -> URIRef:
        """Create a data property with a domain (one class or a union) and a datatype range."""
        range_type = get_datatype(datatype)
        domains = self._require_classes("add_data_property_with_range", domain_iris)

        property_iri = self._new_data_property(name)
        self.store.add_axiom(axioms.data_property_domain(property_iri, domains))
        self.store.add_axiom(axioms.data_property_range(property_iri, range_type))
        logger.info(f"Added data property '{name}' as {property_iri} with range {range_type}")
        return property_iri

    # Primitive axioms

    def assert_some_values_from(self, subject_class_iri: str, object_class_iri: str,
                                property_iri: str) -> None:
        """Every instance of the subject class is related to at least one instance of the object class."""
        operation = "assert_some_values_from"
        subject_class = self._require_class(operation, subject_class_iri)
        object_class = self._require_class(operation, object_class_iri)
        prop = self._require_object_property(operation, property_iri)
        self.store.add_axiom(axioms.some_values_from(subject_class, prop, object_class))

    def assert_has_value(self, class_iri: str, individual_iri: str, property_iri: str) -> None:
        """Every instance of the class is related to the given individual."""
        operation = "assert_has_value"
        owl_class = self._require_class(operation, class_iri)
        individual = self._require_individual(operation, individual_iri)
        prop = self._require_object_property(operation, property_iri)
        self.store.add_axiom(axioms.has_value(owl_class, prop, individual))

    def assert_object_property_assertion(self, subject_iri: str, object_iri: str,
                                         property_iri: str) -> None:
        operation = "assert_object_property_assertion"
        subject = self._require_individual(operation, subject_iri)
        obj = self._require_individual(operation, object_iri)
        prop = self._require_object_property(operation, property_iri)
        self.store.add_axiom(axioms.object_property_assertion(prop, subject, obj))

    def assert_data_property_axiom(self, class_iri: str, value, property_iri: str) -> None:
        """Every instance of the class has the literal value for the data property."""
        operation = "assert_data_property_axiom"
        owl_class = self._require_class(operation, class_iri)
        prop = self._require_data_property(operation, property_iri)
        self.store.add_axiom(axioms.has_value(owl_class, prop, to_literal(value)))

    def assert_data_property_assertion(self, individual_iri: str, value, property_iri: str) -> None:
        operation = "assert_data_property_assertion"
        individual = self._require_individual(operation, individual_iri)
        prop = self._require_data_property(operation, property_iri)
        self.store.add_axiom(axioms.data_property_assertion(prop, individual, to_literal(value)))

    # Helpers

    def _new_object_property(self, name: str) -> URIRef:
        property_iri = self.identifiers.generate_unique_iri()
        self.store.add_axiom(axioms.declare_object_property(property_iri))
        self.store.add_axiom(axioms.label(property_iri, name))
        return property_iri

    def _new_data_property(self, name: str) -> URIRef:
        property_iri = self.identifiers.generate_unique_iri()
        self.store.add_axiom(axioms.declare_data_property(property_iri))
        self.store.add_axiom(axioms.label(property_iri, name))
        return property_iri

    def _add_object_domain_range(self, property_iri: URIRef, domains: List[URIRef],
                                 range_class: URIRef) -> None:
        self.store.add_axiom(axioms.object_property_domain(property_iri, domains))
        self.store.add_axiom(axioms.object_property_range(property_iri, range_class))
        for domain in domains:
            self.assert_some_values_from(domain, range_class, property_iri)

    def _require_classes(self, operation: str, class_iris: Union[str, Iterable[str]]) -> List[URIRef]:
        """Normalize one IRI or a collection of IRIs to a non-empty, duplicate-free class list."""
        if isinstance(class_iris, str):
            class_iris = [class_iris]
        classes: List[URIRef] = []
        for iri in class_iris:
            class_iri = self._require_class(operation, iri)
            if class_iri not in classes:
                classes.append(class_iri)
        if not classes:
            raise ValueError(f"{operation}: at least one domain class is required")
        return classes

    # Kind checks for the primitive axioms; individuals are never accepted as classes

    def _require_class(self, operation: str, iri: str) -> URIRef:
        class_iri = URIRef(iri)
        if self.store.kind_of(class_iri) is not EntityKind.CLASS:
            raise NotFoundError(operation, iri)
        return class_iri

    def _require_individual(self, operation: str, iri: str) -> URIRef:
        individual_iri = URIRef(iri)
        if not self.store.is_individual(individual_iri):
            raise NotFoundError(operation, iri, expected="individual")
        return individual_iri

    def _require_object_property(self, operation: str, iri: str) -> URIRef:
        property_iri = URIRef(iri)
        if not self.store.is_object_property(property_iri):
            raise NotFoundError(operation, iri, expected="object property")
        return property_iri

    def _require_data_property(self, operation: str, iri: str) -> URIRef:
        property_iri = URIRef(iri)
        if not self.store.is_data_property(property_iri):
            raise NotFoundError(operation, iri, expected="data property")
        return property_iri
