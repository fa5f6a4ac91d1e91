# taskhub/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- db: Database configuration and connection management
- errors: Domain error hierarchy and the uniform error body
- security: Password hashing and identity tokens
"""
