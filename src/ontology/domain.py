"""
Domain models for the ontology module.

These models describe the pieces the builders pass around: entity kinds,
axioms expressed as RDF triples, store configuration and statistics.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from rdflib.term import Node


Triple = Tuple[Node, Node, Node]


class EntityKind(Enum):
    """What an IRI denotes in the current ontology."""

    UNKNOWN = "unknown"
    CLASS = "class"
    INDIVIDUAL = "individual"


@dataclass(frozen=True)
class Axiom:
    """A single OWL axiom in its RDF encoding.

    Restrictions and class unions need several triples (and blank nodes),
    so an axiom is the full group of triples that has to be added together.
    """

    kind: str                           # e.g. "SubClassOf", "ClassAssertion"
    triples: Tuple[Triple, ...]

    def __len__(self) -> int:
        return len(self.triples)


@dataclass
class OntologyConfig:
    """Configuration for creating or opening an ontology."""

    namespace: str = "http://example.org/ontology/"
    default_format: str = "xml"         # RDF/XML, the usual .owl serialization


@dataclass
class OntologyStats:
    """Statistics about the ontology content."""

    total_classes: int = 0
    total_individuals: int = 0
    total_object_properties: int = 0
    total_datatype_properties: int = 0
    total_triples: int = 0
