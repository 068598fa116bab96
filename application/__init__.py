"""
Application Layer for the Hunter System API.

This package contains:
- ports/: Abstract repository and provider interfaces (what the core needs)
- use_cases/: Workflows coordinating domain rules and ports
- exceptions: Error taxonomy shared with the infrastructure and API layers
"""
