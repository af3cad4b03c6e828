"""ConceptViz backend: topic-to-Mermaid generation and sanitation."""
