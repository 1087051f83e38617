"""
Application Layer

Contains the command pipeline, command handlers, validators and application
services. This layer orchestrates domain objects and infrastructure ports.

Structure:
- commands/: one handler per slash command (leave, loop)
- validation/: precondition validators and the chain runner
- services/: session lifecycle orchestration
- interfaces/: port interfaces for infrastructure adapters
"""
