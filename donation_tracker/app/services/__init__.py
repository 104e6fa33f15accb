"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  The donation
store keeps records in memory; swapping it for a persistent
implementation only requires providing the same operations.
"""
