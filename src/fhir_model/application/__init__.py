"""Application layer - Port definitions consumed by the domain model.

This layer contains:
- Ports: Abstract interfaces (e.g. Visitor) that the model drives during traversal

The application layer depends only on the domain layer.
Concrete visitors live in the infrastructure layer.
"""
