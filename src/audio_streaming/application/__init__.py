"""
Application Layer

Contains use cases, command/query handlers, and application services.
This layer orchestrates domain objects and infrastructure to fulfill use cases.

Structure:
- commands/: CQRS write operations (ToggleLikeCommand)
- queries/: CQRS read operations (GetQueueQuery)
- services/: Library persistence, player orchestration and the starter catalog
"""
