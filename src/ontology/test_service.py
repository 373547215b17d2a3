"""
Integration test for the ontology service.

HOW TO RUN:
The virtual environment .venv should be activated before running the tests.

From the src directory, run:
    python -m ontology.test_service

Or from the project root:
    cd src; python -m ontology.test_service

The test builds small ontologies in memory and saves only to temporary files.
"""

import os
import tempfile

# Import statements using relative imports
from .service import OntologyService
from .domain import EntityKind, OntologyConfig
from .errors import NotFoundError
from .files import entities_from_file
from rdflib import Literal, RDF, RDFS, OWL
from rdflib.namespace import SKOS


NS = "http://ex.org/"


def test_create_with_config():
    """Test creating a service from an OntologyConfig."""
    print("Testing OntologyService.create with config...")

    config = OntologyConfig(namespace="http://config.org/onto#", default_format="turtle")
    service = OntologyService.create(NS, config)

    assert service.store.namespace == NS
    assert service.store.default_format == "turtle"
    assert str(service.generate_unique_iri()).startswith(NS)

    print("✓ OntologyService.create with config working correctly")


def test_hospital_scenario():
    """Person > Doctor, Asha the doctor treats a patient."""
    print("Testing end-to-end scenario...")

    service = OntologyService.create(NS)
    graph = service.store.graph

    person = service.add_class("Person")
    doctor = service.add_subclass(person, "Doctor")
    asha = service.add_individual("Asha", doctor)
    patient = service.add_individual("Patient")
    treats = service.add_object_property("treats", asha, patient)

    assert service.kind_of(person) is EntityKind.CLASS
    assert service.kind_of(asha) is EntityKind.INDIVIDUAL
    assert service.kind_of(patient) is EntityKind.INDIVIDUAL
    assert (patient, RDF.type, OWL.NamedIndividual) in graph
    assert (asha, RDF.type, doctor) in graph
    assert (doctor, RDFS.subClassOf, person) in graph
    assert (asha, treats, patient) in graph

    assert service.get_subclasses(person) == {doctor}
    assert service.get_superclasses(doctor) == [person]
    assert service.get_classes_by_label("doc") == [doctor]

    stats = service.get_stats()
    assert stats.total_classes == 2
    assert stats.total_individuals == 2
    assert stats.total_object_properties == 1

    print("✓ End-to-end scenario working correctly")


def test_bulk_additions_keep_order():
    """Bulk operations return IRIs in input order, duplicates included."""
    print("Testing bulk additions...")

    service = OntologyService.create(NS)
    graph = service.store.graph
    place = service.add_class("Place")

    names = ["State", "District", "City", "City"]
    subclasses = service.add_subclasses(place, names)
    assert len(subclasses) == 4
    assert len(set(subclasses)) == 4
    assert [str(graph.value(iri, RDFS.label)) for iri in subclasses] == names

    individuals = service.add_individuals(["Pune", "Goa"], subclasses[2])
    assert [str(graph.value(iri, RDFS.label)) for iri in individuals] == ["Pune", "Goa"]
    assert all((iri, RDF.type, subclasses[2]) in graph for iri in individuals)

    print("✓ Bulk additions working correctly")


def test_subclass_of_unknown_parent():
    """A missing parent raises NotFoundError and adds nothing."""
    print("Testing subclass of unknown parent...")

    service = OntologyService.create(NS)
    size_before = len(service.store.graph)

    try:
        service.add_subclass(NS + "Missing", "Orphan")
        assert False, "Expected NotFoundError"
    except NotFoundError as e:
        assert e.iri == NS + "Missing"
        assert "add_subclass" in str(e)

    try:
        service.add_individual("Orphan", NS + "Missing")
        assert False, "Expected NotFoundError"
    except NotFoundError:
        pass

    assert len(service.store.graph) == size_before
    assert service.get_classes_by_label("Orphan") == []

    print("✓ Subclass of unknown parent handled correctly")


def test_subclasses_with_definitions():
    """Test bulk subclasses paired with their SKOS definitions."""
    print("Testing add_subclasses_with_definitions...")

    service = OntologyService.create(NS)
    graph = service.store.graph
    place = service.add_class("Place")

    iris = service.add_subclasses_with_definitions(
        place, ["State", "City"], ["First-level division", "Populated place"]
    )
    assert (iris[0], SKOS.definition, Literal("First-level division")) in graph
    assert (iris[1], SKOS.definition, Literal("Populated place")) in graph

    try:
        service.add_subclasses_with_definitions(place, ["A", "B"], ["only one"])
        assert False, "Expected ValueError"
    except ValueError:
        pass

    print("✓ add_subclasses_with_definitions working correctly")


def test_set_type():
    """Test typing individuals and subclassing classes after the fact."""
    print("Testing set_type...")

    service = OntologyService.create(NS)
    graph = service.store.graph
    person = service.add_class("Person")
    agent = service.add_class("Agent")
    asha = service.add_individual("Asha")

    service.set_type(asha, person)
    assert (asha, RDF.type, person) in graph

    service.set_type(person, agent)
    assert service.get_superclasses(person) == [agent]

    for entity, type_iri in [(NS + "ghost", person), (asha, NS + "ghost")]:
        try:
            service.set_type(entity, type_iri)
            assert False, "Expected NotFoundError"
        except NotFoundError:
            pass

    print("✓ set_type working correctly")


def test_individual_by_iri():
    """Test individuals under externally supplied IRIs."""
    print("Testing add_individual_by_iri...")

    service = OntologyService.create(NS)
    graph = service.store.graph
    state = service.add_class("State")

    goa = service.add_individual_by_iri("http://sws.geonames.org/1270829/", "Goa", state)
    assert str(goa) == "http://sws.geonames.org/1270829/"
    assert (goa, RDF.type, state) in graph
    assert (goa, RDFS.label, Literal("Goa")) in graph

    print("✓ add_individual_by_iri working correctly")


def test_save_and_open():
    """Test saving through the service and reopening the document."""
    print("Testing save/open through the service...")

    service = OntologyService.create(NS)
    person = service.add_class("Person")
    service.add_individual("Asha", person)
    service.import_ontology("http://purl.org/other")

    with tempfile.TemporaryDirectory() as temp_dir:
        path = os.path.join(temp_dir, "people.owl")
        saved = service.save(path)
        assert os.path.exists(saved)

        reopened = OntologyService.open(path, NS)
        assert reopened.store.ontology_iri == service.store.ontology_iri
        assert reopened.get_classes_by_label("person") == [person]
        assert reopened.get_stats().total_individuals == 1

        # The reopened ontology keeps growing under the same namespace
        doctor = reopened.add_subclass(person, "Doctor")
        assert reopened.get_subclasses(person) == {doctor}

    print("✓ Save/open through the service working correctly")


def test_entities_from_file():
    """Test reading entity names from a text file."""
    print("Testing entities_from_file...")

    with tempfile.TemporaryDirectory() as temp_dir:
        path = os.path.join(temp_dir, "names.txt")
        with open(path, "w", encoding="utf-8") as file:
            file.write("Pune, Maharashtra\n\nPanaji, Goa\n")

        assert entities_from_file(path) == ["Pune, Maharashtra", "Panaji, Goa"]
        assert entities_from_file(path, prefix=NS, suffix="!") == [
            NS + "Pune, Maharashtra!", NS + "Panaji, Goa!"
        ]

    print("✓ entities_from_file working correctly")


def run_all_tests():
    """Run all test functions."""
    print("=" * 50)
    print("Running OntologyService Integration Tests")
    print("=" * 50)

    test_functions = [
        test_create_with_config,
        test_hospital_scenario,
        test_bulk_additions_keep_order,
        test_subclass_of_unknown_parent,
        test_subclasses_with_definitions,
        test_set_type,
        test_individual_by_iri,
        test_save_and_open,
        test_entities_from_file
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
