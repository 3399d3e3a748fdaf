"""
Contract tests that check the codec against FHIR R5 JSON documents.

These tests ensure every sample document survives parse and emit unchanged.
Run with: pytest tests/contract -v
"""
