"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They depend on ports (interfaces) from core/, never on concrete
implementations from infrastructure/.

This layer contains:
- GraphTraversalService: breadth-first discovery of related entries
- ChronologicalSorter: deterministic ordering of discovered entries
- TimelineService: timeline generation, status and batch processing
"""
