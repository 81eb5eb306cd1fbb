"""
Orchestration Layer - Workflow Coordination

This layer coordinates the sample workflow.
- Pure sequencing of resource operations
- Decides which failures abort the run and which are recovered
- Guarantees resource group cleanup
"""
