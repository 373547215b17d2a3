"""
Unit test for the ontology store.

HOW TO RUN:
The virtual environment .venv should be activated before running the tests.

From the src directory, run:
    python -m ontology.test_store

Or from the project root:
    cd src; python -m ontology.test_store

The test works on temporary files only.
"""

import os
import tempfile

# Import statements using relative imports
from .store import OntologyStore
from .service import OntologyService
from .domain import EntityKind, OntologyStats
from .errors import LoadError, SaveError
from . import axioms
from rdflib import Literal, URIRef, RDF, RDFS, OWL


NS = "http://ex.org/"


def test_create_store():
    """Test creating a new empty ontology."""
    print("Testing OntologyStore.create...")

    store = OntologyStore.create(NS)

    assert store.namespace == NS
    assert store.ontology_iri is not None
    assert str(store.ontology_iri).startswith(NS)
    assert (store.ontology_iri, RDF.type, OWL.Ontology) in store.graph
    assert len(store.graph) == 1

    print("✓ OntologyStore.create working correctly")


def test_kind_of():
    """Test tagging IRIs as class, individual or unknown."""
    print("Testing kind_of...")

    store = OntologyStore.create(NS)
    person = URIRef(NS + "Person")
    asha = URIRef(NS + "Asha")
    untyped = URIRef(NS + "Untyped")
    store.add_axiom(axioms.declare_class(person))
    store.add_axiom(axioms.class_assertion(person, asha))
    store.add_axiom(axioms.declare_individual(untyped))

    assert store.kind_of(person) is EntityKind.CLASS
    assert store.kind_of(asha) is EntityKind.INDIVIDUAL
    assert store.kind_of(untyped) is EntityKind.INDIVIDUAL
    assert store.kind_of(URIRef(NS + "Nobody")) is EntityKind.UNKNOWN

    assert store.is_class(person) and not store.is_individual(person)
    assert store.is_individual(asha) and not store.is_class(asha)

    print("✓ kind_of working correctly")


def test_undeclared_taxonomy_classes_count_as_classes():
    """Classes used only in rdfs:subClassOf (common in loaded files) are still classes."""
    print("Testing undeclared taxonomy classes...")

    store = OntologyStore(namespace=NS)
    store.graph.add((URIRef(NS + "Cat"), RDFS.subClassOf, URIRef(NS + "Animal")))

    assert store.is_class(URIRef(NS + "Cat"))
    assert store.is_class(URIRef(NS + "Animal"))

    print("✓ Undeclared taxonomy classes handled correctly")


def test_loaded_individuals_of_undeclared_classes():
    """Individuals typed with a class that is only used in the taxonomy are individuals."""
    print("Testing individuals of undeclared classes...")

    turtle = (
        "@prefix : <http://ex.org/> .\n"
        "@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .\n"
        ":Doctor rdfs:subClassOf :Person .\n"
        ":Asha a :Doctor .\n"
        ":Ravi a :Doctor .\n"
    )
    doctor, asha, ravi = URIRef(NS + "Doctor"), URIRef(NS + "Asha"), URIRef(NS + "Ravi")

    with tempfile.TemporaryDirectory() as temp_dir:
        path = os.path.join(temp_dir, "clinic.ttl")
        with open(path, "w", encoding="utf-8") as file:
            file.write(turtle)

        store = OntologyStore.open(path, NS)
        assert store.kind_of(doctor) is EntityKind.CLASS
        assert store.kind_of(asha) is EntityKind.INDIVIDUAL
        assert store.kind_of(ravi) is EntityKind.INDIVIDUAL

        service = OntologyService.open(path, NS)
        treats = service.add_object_property("treats", asha, ravi)
        assert (asha, treats, ravi) in service.store.graph

    print("✓ Individuals of undeclared classes handled correctly")


def test_declarations_are_not_individuals():
    """Class and property declarations do not make an IRI an individual."""
    print("Testing declarations vs. individuals...")

    store = OntologyStore(namespace=NS)
    store.graph.add((OWL.Class, RDFS.subClassOf, RDFS.Class))
    person = URIRef(NS + "Person")
    knows = URIRef(NS + "knows")
    store.add_axiom(axioms.declare_class(person))
    store.add_axiom(axioms.declare_object_property(knows))
    thing = URIRef(NS + "thing")
    store.graph.add((thing, RDF.type, OWL.Thing))

    assert store.kind_of(person) is EntityKind.CLASS
    assert not store.is_individual(knows)
    assert store.is_object_property(knows) and not store.is_data_property(knows)
    assert store.kind_of(thing) is EntityKind.INDIVIDUAL

    print("✓ Declarations vs. individuals handled correctly")


def test_in_signature():
    """Test signature membership in any triple position."""
    print("Testing in_signature...")

    store = OntologyStore(namespace=NS)
    a, p, b = URIRef(NS + "a"), URIRef(NS + "p"), URIRef(NS + "b")
    store.graph.add((a, p, b))

    assert store.in_signature(a)
    assert store.in_signature(p)
    assert store.in_signature(b)
    assert not store.in_signature(URIRef(NS + "c"))

    print("✓ in_signature working correctly")


def test_save_and_open_round_trip():
    """Test that all triples survive save -> open."""
    print("Testing save/open round trip...")

    store = OntologyStore.create(NS)
    person = URIRef(NS + "Person")
    store.add_axiom(axioms.declare_class(person))
    store.add_axiom(axioms.label(person, "Person"))
    store.add_axiom(axioms.some_values_from(person, URIRef(NS + "knows"), person))

    with tempfile.TemporaryDirectory() as temp_dir:
        for file_name in ["onto.owl", "onto.ttl"]:
            path = os.path.join(temp_dir, file_name)
            store.save(path)
            loaded = OntologyStore.open(path, NS)

            assert len(loaded.graph) == len(store.graph)
            assert loaded.ontology_iri == store.ontology_iri
            assert (person, RDFS.label, Literal("Person")) in loaded.graph
            assert loaded.is_class(person)

    print("✓ Save/open round trip working correctly")


def test_open_errors():
    """Test LoadError on missing and malformed documents."""
    print("Testing open errors...")

    with tempfile.TemporaryDirectory() as temp_dir:
        missing = os.path.join(temp_dir, "missing.owl")
        try:
            OntologyStore.open(missing, NS)
            assert False, "Expected LoadError"
        except LoadError:
            pass

        malformed = os.path.join(temp_dir, "broken.owl")
        with open(malformed, "w", encoding="utf-8") as file:
            file.write("<rdf:RDF this is not xml")
        try:
            OntologyStore.open(malformed, NS)
            assert False, "Expected LoadError"
        except LoadError:
            pass

    print("✓ Open errors handled correctly")


def test_save_error():
    """Test SaveError when the target directory does not exist."""
    print("Testing save error...")

    store = OntologyStore.create(NS)
    with tempfile.TemporaryDirectory() as temp_dir:
        path = os.path.join(temp_dir, "no", "such", "dir", "onto.owl")
        try:
            store.save(path)
            assert False, "Expected SaveError"
        except SaveError as e:
            assert isinstance(e, OSError)

    print("✓ Save error handled correctly")


def test_import_ontology():
    """Test adding an owl:imports declaration."""
    print("Testing import_ontology...")

    store = OntologyStore.create(NS)
    store.import_ontology("http://purl.org/other")

    assert (store.ontology_iri, OWL.imports, URIRef("http://purl.org/other")) in store.graph

    print("✓ import_ontology working correctly")


def test_stats():
    """Test ontology statistics."""
    print("Testing get_stats...")

    store = OntologyStore.create(NS)
    person = URIRef(NS + "Person")
    store.add_axiom(axioms.declare_class(person))
    store.add_axiom(axioms.class_assertion(person, URIRef(NS + "Asha")))
    store.add_axiom(axioms.declare_object_property(URIRef(NS + "knows")))
    store.add_axiom(axioms.declare_data_property(URIRef(NS + "born")))

    stats = store.get_stats()
    assert isinstance(stats, OntologyStats)
    assert stats.total_classes == 1
    assert stats.total_individuals == 1
    assert stats.total_object_properties == 1
    assert stats.total_datatype_properties == 1
    assert stats.total_triples == len(store.graph)

    print("✓ get_stats working correctly")


def run_all_tests():
    """Run all test functions."""
    print("=" * 50)
    print("Running OntologyStore Tests")
    print("=" * 50)

    test_functions = [
        test_create_store,
        test_kind_of,
        test_undeclared_taxonomy_classes_count_as_classes,
        test_loaded_individuals_of_undeclared_classes,
        test_declarations_are_not_individuals,
        test_in_signature,
        test_save_and_open_round_trip,
        test_open_errors,
        test_save_error,
        test_import_ontology,
        test_stats
    ]

    passed = 0
    failed = 0

    for test_func in test_functions:
        try:
            test_func()
            passed += 1
        except Exception as e:
            print(f"✗ {test_func.__name__} FAILED: {e}")
            failed += 1

    print("=" * 50)
    print(f"Test Results: {passed} passed, {failed} failed")
    print("=" * 50)

    return failed == 0


def main():
    """Main function to run the tests."""
    success = run_all_tests()
    if success:
        print("All tests passed!")
        return 0
    else:
        print("Some tests failed!")
        return 1


if __name__ == "__main__":
    exit(main())
