"""
Exceptions raised by the ontology module.
"""


class OntologyError(Exception):
    """Base class for all ontology authoring errors."""


class NotFoundError(OntologyError):
    """A referenced IRI is not declared with the kind the operation requires."""

    def __init__(self, operation: str, iri: str, expected: str = "class"):
        self.operation = operation
        self.iri = str(iri)
        self.expected = expected
        super().__init__(f"{operation}: {expected} not found in the ontology: {iri}")


class SemanticMismatchError(OntologyError):
    """A relation was requested between an individual and a class."""

    def __init__(self, operation: str, subject_iri: str, object_iri: str,
                 subject_kind: str, object_kind: str):
        self.operation = operation
        self.subject_iri = str(subject_iri)
        self.object_iri = str(object_iri)
        super().__init__(
            f"{operation}: cannot connect {subject_kind} {subject_iri} "
            f"with {object_kind} {object_iri}"
        )


class LoadError(OntologyError):
    """The ontology document could not be read or parsed."""


class SaveError(OntologyError, OSError):
    """The ontology document could not be written."""
