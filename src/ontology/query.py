"""
Read-only queries over the accumulated ontology.
"""

from typing import List, Set

from rdflib import Literal, URIRef, RDF, RDFS, OWL

from .errors import NotFoundError
from .reasoner import StructuralReasoner


class QueryFacade:
    """Subclass/superclass lookup and label search.

    A fresh StructuralReasoner is created for each query, so results always
    reflect the current state of the ontology.
    """

    def __init__(self, store):
        self.store = store

    def get_subclasses(self, parent_iri: str) -> Set[URIRef]:
        """All (transitive) subclasses of a class."""
        parent = URIRef(parent_iri)
        if not self.store.is_class(parent):
            raise NotFoundError("get_subclasses", parent_iri)
        return StructuralReasoner(self.store.graph).get_sub_classes(parent, direct=False)

    def get_superclasses(self, class_iri: str) -> List[URIRef]:
        """Direct superclasses of a class."""
        owl_class = URIRef(class_iri)
        if not self.store.is_class(owl_class):
            raise NotFoundError("get_superclasses", class_iri)
        return StructuralReasoner(self.store.graph).get_super_classes(owl_class, direct=True)

    def get_classes_by_label(self, text: str) -> List[URIRef]:
        """Classes with an rdfs:label containing `text` (case-insensitive)."""
        needle = text.lower()
        graph = self.store.graph
        classes = {s for s in graph.subjects(RDF.type, OWL.Class) if isinstance(s, URIRef)}
        classes |= {s for s in graph.subjects(RDFS.subClassOf, None) if isinstance(s, URIRef)}

        matches = []
        for class_iri in sorted(classes):
            for label in graph.objects(class_iri, RDFS.label):
                if isinstance(label, Literal) and needle in str(label).lower():
                    matches.append(class_iri)
                    break
        return matches
