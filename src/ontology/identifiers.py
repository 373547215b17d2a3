"""
Unique IRI generation for new ontology entities.
"""

import uuid
from typing import Optional

from rdflib import URIRef


class IdentifierGenerator:
    """Mints IRIs of the form <prefix><uuid4> that are not yet used in the ontology."""

    def __init__(self, store, prefix: Optional[str] = None):
        """
        Args:
            store: OntologyStore whose signature new IRIs are checked against
            prefix: Namespace prefix (defaults to the store namespace)
        """
        self.store = store
        self.prefix = prefix if prefix is not None else store.namespace

    def generate_unique_iri(self, prefix: Optional[str] = None) -> URIRef:
        """Return a fresh IRI, retrying until it does not occur in the ontology."""
        prefix = prefix if prefix is not None else self.prefix
        while True:
            candidate = URIRef(prefix + str(uuid.uuid4()))
            if not self.store.in_signature(candidate):
                return candidate
