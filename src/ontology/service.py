"""
High-level ontology service providing the public interface for all ontology operations.

This is the only public interface into the ontology module. The store,
the builders and the reasoner are private implementation details; the
service wires them to one store and exposes their operations.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set, Union

from rdflib import URIRef

from .annotations import AnnotationBuilder
from .domain import EntityKind, OntologyConfig, OntologyStats
from .identifiers import IdentifierGenerator
from .individuals import IndividualBuilder
from .query import QueryFacade
from .relations import RelationBuilder, get_datatype
from .store import OntologyStore
from .taxonomy import TaxonomyBuilder

logger = logging.getLogger(__name__)


class OntologyService:
    """Authoring interface for one OWL ontology.

    Every class, individual and property added through the service gets a
    new IRI `<namespace><uuid>`, returned to the caller for later reference.
    Adding the same name twice creates two entities.
    """

    def __init__(self, store: OntologyStore):
        """Initialize the ontology service.

        Args:
            store: Store owning the ontology graph
        """
        self.store = store
        self.identifiers = IdentifierGenerator(store)
        self.taxonomy = TaxonomyBuilder(store, self.identifiers)
        self.individuals = IndividualBuilder(store, self.identifiers)
        self.relations = RelationBuilder(store, self.identifiers)
        self.annotations = AnnotationBuilder(store)
        self.queries = QueryFacade(store)

    @classmethod
    def create(cls, namespace: str, config: Optional[OntologyConfig] = None) -> "OntologyService":
        """Start a new, empty ontology."""
        return cls(OntologyStore.create(namespace, config))

    @classmethod
    def open(cls, path: Union[str, Path], namespace: str,
             config: Optional[OntologyConfig] = None) -> "OntologyService":
        """Open an existing ontology document (raises LoadError)."""
        return cls(OntologyStore.open(path, namespace, config))

    def save(self, path: Union[str, Path], rdf_format: Optional[str] = None) -> Path:
        """Save the ontology (raises SaveError)."""
        return self.store.save(path, rdf_format)

    def import_ontology(self, ontology_iri: str) -> None:
        self.store.import_ontology(ontology_iri)

    def get_stats(self) -> OntologyStats:
        return self.store.get_stats()

    # Identifiers and lookups

    def generate_unique_iri(self, prefix: Optional[str] = None) -> URIRef:
        return self.identifiers.generate_unique_iri(prefix)

    def is_class(self, iri: str) -> bool:
        return self.store.is_class(URIRef(iri))

    def is_individual(self, iri: str) -> bool:
        return self.store.is_individual(URIRef(iri))

    def kind_of(self, iri: str) -> EntityKind:
        return self.store.kind_of(URIRef(iri))

    # Taxonomy

    def add_class(self, name: str) -> URIRef:
        return self.taxonomy.add_class(name)

    def add_subclass(self, parent_iri: str, name: str) -> URIRef:
        return self.taxonomy.add_subclass(parent_iri, name)

    def add_subclasses(self, parent_iri: str, names: Sequence[str]) -> List[URIRef]:
        return self.taxonomy.add_subclasses(parent_iri, names)

    def add_subclasses_with_definitions(self, parent_iri: str, names: Sequence[str],
                                        definitions: Sequence[str]) -> List[URIRef]:
        return self.taxonomy.add_subclasses_with_definitions(parent_iri, names, definitions)

    def set_type(self, entity_iri: str, type_iri: str) -> None:
        self.taxonomy.set_type(entity_iri, type_iri)

    # Individuals

    def add_individual(self, name: str, type_iri: Optional[str] = None) -> URIRef:
        return self.individuals.add_individual(name, type_iri)

    def add_individuals(self, names: Sequence[str], type_iri: Optional[str] = None) -> List[URIRef]:
        return self.individuals.add_individuals(names, type_iri)

    def add_individual_by_iri(self, iri: str, label: str, type_iri: Optional[str] = None) -> URIRef:
        return self.individuals.add_individual_by_iri(iri, label, type_iri)

    # Relations

    def add_object_property(self, name: str, subject_iri: str, object_iri: str) -> URIRef:
        return self.relations.add_object_property(name, subject_iri, object_iri)

    def add_object_property_with_domain_range(self, name: str,
                                              domain_iris: Union[str, Iterable[str]],
                                              range_iri: str) -> URIRef:
        return self.relations.add_object_property_with_domain_range(name, domain_iris, range_iri)

    def add_data_property(self, name: str, subject_iri: str, value) -> URIRef:
        return self.relations.add_data_property(name, subject_iri, value)

    def add_data_property_with_range(self, name: str,
                                     domain_iris: Union[str, Iterable[str]],
                                     datatype: Union[str, URIRef]) -> URIRef:
        return self.relations.add_data_property_with_range(name, domain_iris, datatype)

    def assert_some_values_from(self, subject_class_iri: str, object_class_iri: str,
                                property_iri: str) -> None:
        self.relations.assert_some_values_from(subject_class_iri, object_class_iri, property_iri)

    def assert_has_value(self, class_iri: str, individual_iri: str, property_iri: str) -> None:
        self.relations.assert_has_value(class_iri, individual_iri, property_iri)

    def assert_object_property_assertion(self, subject_iri: str, object_iri: str,
                                         property_iri: str) -> None:
        self.relations.assert_object_property_assertion(subject_iri, object_iri, property_iri)

    def assert_data_property_axiom(self, class_iri: str, value, property_iri: str) -> None:
        self.relations.assert_data_property_axiom(class_iri, value, property_iri)

    def assert_data_property_assertion(self, individual_iri: str, value, property_iri: str) -> None:
        self.relations.assert_data_property_assertion(individual_iri, value, property_iri)

    def get_datatype(self, name: str) -> URIRef:
        return get_datatype(name)

    # Annotations

    def label_entity(self, iri: str, text: str, allow_accents: bool = True) -> None:
        self.annotations.label_entity(iri, text, allow_accents)

    def annotate_class(self, iri: str, text: str) -> None:
        self.annotations.annotate_class(iri, text)

    def add_skos_definition(self, iri: str, definition: str) -> None:
        self.annotations.add_skos_definition(iri, definition)

    def add_skos_alt_label(self, iri: str, alt_label: str) -> None:
        self.annotations.add_skos_alt_label(iri, alt_label)

    def add_annotation_property(self, iri: str, label: str) -> URIRef:
        return self.annotations.add_annotation_property(iri, label)

    # Queries

    def get_subclasses(self, parent_iri: str) -> Set[URIRef]:
        return self.queries.get_subclasses(parent_iri)

    def get_superclasses(self, class_iri: str) -> List[URIRef]:
        return self.queries.get_superclasses(class_iri)

    def get_classes_by_label(self, text: str) -> List[URIRef]:
        return self.queries.get_classes_by_label(text)
