"""Internal modules for Courier SDK.

WARNING: This package contains implementation modules used by CourierClient.
These are not intended for direct use in application code.

Modules:
    pipeline - Request lifecycle pipeline
    http - Shared HTTP transport configuration
    redaction - Sensitive header redaction for debug logs
"""
