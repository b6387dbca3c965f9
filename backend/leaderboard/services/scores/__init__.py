"""Score services: submission validation, reconciliation, and storage.

Everything here is transport-agnostic. HTTP routes normalize a request body
with ``validate_submission`` and hand the result to ``submit_score`` together
with the store bound on the application.
"""
