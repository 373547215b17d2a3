"""
Factory functions producing OWL axioms in their RDF encoding.

Each function returns an Axiom holding every triple needed to express it,
including the declarations of the entities it introduces. Anonymous class
expressions (restrictions, unions) are encoded with fresh blank nodes.
"""

from typing import List, Sequence

from rdflib import BNode, Graph, Literal, URIRef, RDF, RDFS, OWL
from rdflib.collection import Collection
from rdflib.namespace import SKOS

from .domain import Axiom, Triple


# Declarations

def declare_class(class_iri: URIRef) -> Axiom:
    return Axiom("Declaration", ((class_iri, RDF.type, OWL.Class),))


def declare_individual(individual_iri: URIRef) -> Axiom:
    return Axiom("Declaration", ((individual_iri, RDF.type, OWL.NamedIndividual),))


def declare_object_property(property_iri: URIRef) -> Axiom:
    return Axiom("Declaration", ((property_iri, RDF.type, OWL.ObjectProperty),))


def declare_data_property(property_iri: URIRef) -> Axiom:
    return Axiom("Declaration", ((property_iri, RDF.type, OWL.DatatypeProperty),))


def declare_annotation_property(property_iri: URIRef) -> Axiom:
    return Axiom("Declaration", ((property_iri, RDF.type, OWL.AnnotationProperty),))


# Annotations

def annotation(subject_iri: URIRef, annotation_property: URIRef, value: str) -> Axiom:
    """AnnotationAssertion(property subject "value")."""
    return Axiom("AnnotationAssertion", ((subject_iri, annotation_property, Literal(value)),))


def label(subject_iri: URIRef, text: str) -> Axiom:
    return annotation(subject_iri, RDFS.label, text)


def skos_definition(subject_iri: URIRef, text: str) -> Axiom:
    return annotation(subject_iri, SKOS.definition, text)


def skos_alt_label(subject_iri: URIRef, text: str) -> Axiom:
    return annotation(subject_iri, SKOS.altLabel, text)


# Class axioms

def subclass_of(sub_class: URIRef, super_class: URIRef) -> Axiom:
    """SubClassOf(sub super), declaring the new subclass as owl:Class."""
    return Axiom("SubClassOf", (
        (sub_class, RDF.type, OWL.Class),
        (sub_class, RDFS.subClassOf, super_class),
    ))


def class_assertion(class_iri: URIRef, individual_iri: URIRef) -> Axiom:
    """ClassAssertion(class individual)."""
    return Axiom("ClassAssertion", (
        (individual_iri, RDF.type, OWL.NamedIndividual),
        (individual_iri, RDF.type, class_iri),
    ))


def some_values_from(class_iri: URIRef, property_iri: URIRef, filler_iri: URIRef) -> Axiom:
    """SubClassOf(class ObjectSomeValuesFrom(property filler))."""
    restriction = BNode()
    return Axiom("SubClassOf", (
        (class_iri, RDFS.subClassOf, restriction),
        (restriction, RDF.type, OWL.Restriction),
        (restriction, OWL.onProperty, property_iri),
        (restriction, OWL.someValuesFrom, filler_iri),
    ))


def has_value(class_iri: URIRef, property_iri: URIRef, value) -> Axiom:
    """SubClassOf(class ObjectHasValue/DataHasValue(property value)).

    The value is an individual IRI for object properties and a Literal for
    data properties; the RDF encoding is the same.
    """
    restriction = BNode()
    return Axiom("SubClassOf", (
        (class_iri, RDFS.subClassOf, restriction),
        (restriction, RDF.type, OWL.Restriction),
        (restriction, OWL.onProperty, property_iri),
        (restriction, OWL.hasValue, value),
    ))


def _class_expression(class_iris: Sequence[URIRef]) -> tuple:
    """Return (node, triples) for a single class or the union of several."""
    if len(class_iris) == 1:
        return class_iris[0], []

    # Collection writes the rdf:List straight into a graph, so build it in
    # a scratch graph and lift the triples out.
    scratch = Graph()
    union = BNode()
    members = BNode()
    Collection(scratch, members, list(class_iris))
    triples: List[Triple] = [
        (union, RDF.type, OWL.Class),
        (union, OWL.unionOf, members),
    ]
    triples.extend(scratch)
    return union, triples


# Property axioms

def object_property_domain(property_iri: URIRef, domain_iris: Sequence[URIRef]) -> Axiom:
    domain, triples = _class_expression(domain_iris)
    return Axiom("ObjectPropertyDomain", tuple(triples) + ((property_iri, RDFS.domain, domain),))


def object_property_range(property_iri: URIRef, range_iri: URIRef) -> Axiom:
    return Axiom("ObjectPropertyRange", ((property_iri, RDFS.range, range_iri),))


def data_property_domain(property_iri: URIRef, domain_iris: Sequence[URIRef]) -> Axiom:
    domain, triples = _class_expression(domain_iris)
    return Axiom("DataPropertyDomain", tuple(triples) + ((property_iri, RDFS.domain, domain),))


def data_property_range(property_iri: URIRef, datatype: URIRef) -> Axiom:
    return Axiom("DataPropertyRange", ((property_iri, RDFS.range, datatype),))


def object_property_assertion(property_iri: URIRef, subject_iri: URIRef, object_iri: URIRef) -> Axiom:
    """ObjectPropertyAssertion(property subject object): a single triple."""
    return Axiom("ObjectPropertyAssertion", ((subject_iri, property_iri, object_iri),))


def data_property_assertion(property_iri: URIRef, subject_iri: URIRef, value: Literal) -> Axiom:
    return Axiom("DataPropertyAssertion", ((subject_iri, property_iri, value),))


# Ontology header

def ontology_header(ontology_iri: URIRef) -> Axiom:
    return Axiom("Ontology", ((ontology_iri, RDF.type, OWL.Ontology),))


def imports(ontology_iri: URIRef, imported_iri: URIRef) -> Axiom:
    return Axiom("Import", ((ontology_iri, OWL.imports, imported_iri),))
