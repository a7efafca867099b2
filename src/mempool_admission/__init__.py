"""
Top-level package for the mempool_admission project.

Each admission gate lives in its own subpackage (for example
`mempool_admission.gov_spam_gate`) and plugs into the node's ante pipeline.
"""

__all__: list[str] = []
