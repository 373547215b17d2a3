"""
Structural reasoner over asserted subclass and equivalence axioms.

No description-logic inference is done: the class hierarchy is the
transitive closure of the named rdfs:subClassOf edges, with classes linked
by owl:equivalentClass treated as one node. Anonymous superclasses
(restrictions, unions) are ignored.
"""

from collections import deque
from typing import List, Set

from rdflib import Graph, URIRef, RDF, RDFS, OWL


class StructuralReasoner:
    """Answers subclass/superclass questions from the current graph contents.

    Nothing is cached: build a new reasoner whenever the graph may have changed.
    """

    def __init__(self, graph: Graph):
        self.graph = graph

    def equivalent_classes(self, class_iri: URIRef) -> Set[URIRef]:
        """Named classes equivalent to the given one (including itself)."""
        node = {class_iri}
        queue = deque([class_iri])
        while queue:
            current = queue.popleft()
            linked = list(self.graph.objects(current, OWL.equivalentClass))
            linked += list(self.graph.subjects(OWL.equivalentClass, current))
            for other in linked:
                if isinstance(other, URIRef) and other not in node:
                    node.add(other)
                    queue.append(other)
        return node

    def named_classes(self) -> Set[URIRef]:
        """Every named class declared or used in the taxonomy, owl:Thing and owl:Nothing excluded."""
        classes = {s for s in self.graph.subjects(RDF.type, OWL.Class)}
        classes |= {s for s in self.graph.subjects(RDF.type, RDFS.Class)}
        for sub, sup in self.graph.subject_objects(RDFS.subClassOf):
            classes.update((sub, sup))
        return {c for c in classes if isinstance(c, URIRef)} - {OWL.Thing, OWL.Nothing}

    def get_sub_classes(self, class_iri: URIRef, direct: bool = False) -> Set[URIRef]:
        """Named subclasses, owl:Nothing excluded.

        owl:Thing has every named class below it; its direct subclasses are
        the root classes.
        """
        if class_iri == OWL.Thing:
            classes = self.named_classes()
            if direct:
                return {c for c in classes if self.get_super_classes(c) == [OWL.Thing]}
            return classes

        start = self.equivalent_classes(class_iri)
        result: Set[URIRef] = set()
        visited = set(start)
        queue = deque(start)
        while queue:
            current = queue.popleft()
            for sub in self.graph.subjects(RDFS.subClassOf, current):
                if not isinstance(sub, URIRef) or sub in visited:
                    continue
                for equivalent in self.equivalent_classes(sub):
                    visited.add(equivalent)
                    result.add(equivalent)
                    if not direct:
                        queue.append(equivalent)
        result -= start
        result.discard(OWL.Nothing)
        return result

    def get_super_classes(self, class_iri: URIRef, direct: bool = True) -> List[URIRef]:
        """Named superclasses, owl:Nothing excluded; a root class reports owl:Thing."""
        start = self.equivalent_classes(class_iri)
        result: List[URIRef] = []
        visited = set(start)
        queue = deque(start)
        while queue:
            current = queue.popleft()
            for sup in self.graph.objects(current, RDFS.subClassOf):
                if not isinstance(sup, URIRef) or sup in visited:
                    continue
                for equivalent in sorted(self.equivalent_classes(sup)):
                    visited.add(equivalent)
                    result.append(equivalent)
                    if not direct:
                        queue.append(equivalent)

        result = [iri for iri in result if iri != OWL.Nothing]
        if not result and class_iri != OWL.Thing:
            result.append(OWL.Thing)
        return result
