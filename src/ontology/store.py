"""
RDF-backed store for an OWL ontology document.

The store owns the rdflib graph. It answers membership questions (is this
IRI a class? an individual?) and is the only place where axioms are added,
so every other component goes through `add_axiom`.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rdflib import Graph, URIRef, Namespace, RDF, RDFS, OWL
from rdflib.namespace import SKOS, XSD
from rdflib.plugin import PluginException
from rdflib.util import guess_format

from . import axioms
from .domain import Axiom, EntityKind, OntologyConfig, OntologyStats
from .errors import LoadError, SaveError
from .identifiers import IdentifierGenerator

logger = logging.getLogger(__name__)

# rdf:type objects that declare an entity rather than classify an individual
META_TYPES = frozenset({
    OWL.Class, RDFS.Class, OWL.Restriction, OWL.Ontology, OWL.NamedIndividual,
    OWL.ObjectProperty, OWL.DatatypeProperty, OWL.AnnotationProperty, RDF.Property,
})


class OntologyStore:
    """Owns a single ontology graph and its namespace prefix."""

    def __init__(self, graph: Optional[Graph] = None,
                 namespace: str = "http://example.org/ontology/",
                 ontology_iri: Optional[URIRef] = None,
                 default_format: str = "xml"):
        self.graph = graph if graph is not None else Graph()
        self.namespace = namespace
        self.ontology_iri = ontology_iri
        self.default_format = default_format

        # Namespace management
        self.ns = Namespace(namespace)
        self._init_namespaces()

    def _init_namespaces(self):
        """Bind the prefixes used when serializing."""
        self.graph.bind("onto", self.ns)
        self.graph.bind("owl", OWL)
        self.graph.bind("rdfs", RDFS)
        self.graph.bind("skos", SKOS)
        self.graph.bind("xsd", XSD)

    @classmethod
    def create(cls, namespace: str, config: Optional[OntologyConfig] = None) -> "OntologyStore":
        """Create a new empty ontology whose IRI is minted under the namespace."""
        config = config or OntologyConfig(namespace=namespace)
        store = cls(namespace=namespace, default_format=config.default_format)
        store.ontology_iri = IdentifierGenerator(store).generate_unique_iri()
        store.add_axiom(axioms.ontology_header(store.ontology_iri))
        logger.info(f"Created ontology {store.ontology_iri}")
        return store

    @classmethod
    def open(cls, path: Union[str, Path], namespace: str,
             config: Optional[OntologyConfig] = None) -> "OntologyStore":
        """Load an existing ontology document.

        Raises:
            LoadError: If the file is missing, unreadable or malformed
        """
        config = config or OntologyConfig(namespace=namespace)
        path = Path(path)
        if not path.is_file():
            raise LoadError(f"Ontology document not found: {path}")

        rdf_format = guess_format(str(path)) or config.default_format
        graph = Graph()
        try:
            graph.parse(str(path), format=rdf_format)
        except Exception as e:
            raise LoadError(f"Failed to load ontology from {path}: {e}") from e

        ontology_iri = next(
            (s for s in graph.subjects(RDF.type, OWL.Ontology) if isinstance(s, URIRef)),
            None
        )
        store = cls(graph=graph, namespace=namespace,
                    ontology_iri=ontology_iri, default_format=rdf_format)
        logger.info(f"Loaded ontology {ontology_iri} from {path} ({len(graph)} triples)")
        return store

    def save(self, path: Union[str, Path], rdf_format: Optional[str] = None) -> Path:
        """Serialize the whole ontology to a file.

        Raises:
            SaveError: If the document cannot be written
        """
        path = Path(path)
        rdf_format = rdf_format or guess_format(str(path)) or self.default_format
        try:
            self.graph.serialize(destination=str(path), format=rdf_format)
        except (OSError, PluginException) as e:
            raise SaveError(f"Failed to save ontology to {path}: {e}") from e
        logger.info(f"Saved ontology to {path} ({len(self.graph)} triples, format={rdf_format})")
        return path

    def add_axiom(self, axiom: Axiom) -> None:
        """Add all triples of an axiom to the ontology."""
        for triple in axiom.triples:
            self.graph.add(triple)
        logger.debug(f"Added {axiom.kind} axiom ({len(axiom)} triples)")

    def import_ontology(self, imported_iri: str) -> None:
        """Add an owl:imports declaration to the ontology header."""
        if self.ontology_iri is None:
            raise LoadError("Ontology has no header IRI to attach the import to")
        self.add_axiom(axioms.imports(self.ontology_iri, URIRef(imported_iri)))

    def in_signature(self, iri: URIRef) -> bool:
        """Check whether the IRI occurs anywhere in the ontology."""
        return ((iri, None, None) in self.graph
                or (None, iri, None) in self.graph
                or (None, None, iri) in self.graph)

    def is_class(self, iri: URIRef) -> bool:
        """Check whether the IRI is a class of this ontology (owl:Thing always is)."""
        if iri == OWL.Thing:
            return True
        if (iri, RDF.type, OWL.Class) in self.graph or (iri, RDF.type, RDFS.Class) in self.graph:
            return True
        # Loaded documents do not always declare classes used in the taxonomy
        return (iri, RDFS.subClassOf, None) in self.graph or (None, RDFS.subClassOf, iri) in self.graph

    def is_individual(self, iri: URIRef) -> bool:
        """Check whether the IRI is a named individual of this ontology.

        Besides an owl:NamedIndividual declaration, an rdf:type pointing at any
        class (declared or only used in the taxonomy) makes an individual.
        """
        if (iri, RDF.type, OWL.NamedIndividual) in self.graph:
            return True
        for type_iri in self.graph.objects(iri, RDF.type):
            if isinstance(type_iri, URIRef) and type_iri not in META_TYPES and self.is_class(type_iri):
                return True
        return False

    def is_object_property(self, iri: URIRef) -> bool:
        return (iri, RDF.type, OWL.ObjectProperty) in self.graph

    def is_data_property(self, iri: URIRef) -> bool:
        return (iri, RDF.type, OWL.DatatypeProperty) in self.graph

    def is_declared(self, iri: URIRef) -> bool:
        """Check whether the IRI is declared as any kind of entity."""
        if self.is_class(iri) or self.is_individual(iri):
            return True
        return any(
            (iri, RDF.type, entity_type) in self.graph
            for entity_type in (OWL.ObjectProperty, OWL.DatatypeProperty, OWL.AnnotationProperty)
        )

    def kind_of(self, iri: URIRef) -> EntityKind:
        """Classify an IRI; an IRI punned as both is reported as an individual."""
        if self.is_individual(iri):
            return EntityKind.INDIVIDUAL
        if self.is_class(iri):
            return EntityKind.CLASS
        return EntityKind.UNKNOWN

    def get_stats(self) -> OntologyStats:
        """Get basic statistics about the ontology."""
        individuals = set(self.graph.subjects(RDF.type, OWL.NamedIndividual))
        return OntologyStats(
            total_classes=len({s for s in self.graph.subjects(RDF.type, OWL.Class)
                               if isinstance(s, URIRef)}),
            total_individuals=len(individuals),
            total_object_properties=len(set(self.graph.subjects(RDF.type, OWL.ObjectProperty))),
            total_datatype_properties=len(set(self.graph.subjects(RDF.type, OWL.DatatypeProperty))),
            total_triples=len(self.graph)
        )
