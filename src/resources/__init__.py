"""
Resources Layer - Pure I/O to the Azure Management Plane

This layer wraps the Azure SDK calls used by the sample.
- One module per resource type
- Every long-running operation is awaited before returning
- No workflow decisions, those live in the orchestration layer
"""
