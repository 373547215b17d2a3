"""
Ontology Authoring Module

This module builds OWL ontologies programmatically on top of an rdflib graph:
classes and subclasses, individuals, object and data properties with
domain/range restrictions, and annotations. Every new entity is identified by
a freshly minted IRI under a configured namespace.

Public Interface:
- OntologyService: High-level service for all ontology operations
- Errors: NotFoundError, SemanticMismatchError, LoadError, SaveError

Private Components:
- OntologyStore: rdflib graph wrapper, the single place axioms are added
- Builders: taxonomy, individuals, relations, annotations
- StructuralReasoner: subclass/superclass closure for queries
"""

from .domain import EntityKind, OntologyConfig, OntologyStats
from .errors import OntologyError, NotFoundError, SemanticMismatchError, LoadError, SaveError
from .service import OntologyService

__all__ = [
    "OntologyService",
    "OntologyConfig",
    "OntologyStats",
    "EntityKind",
    "OntologyError",
    "NotFoundError",
    "SemanticMismatchError",
    "LoadError",
    "SaveError",
]
