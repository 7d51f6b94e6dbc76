"""
Application layer - Application Business Rules.

This layer contains application-specific business rules, including:
- Interfaces (ports) for infrastructure dependencies
- Services that build new entities
- Use cases that orchestrate domain logic
"""
