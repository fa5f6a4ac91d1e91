# taskhub/domain/__init__.py
"""
Storage-independent domain layer:
- records: plain data records handed out by repositories
- authorization: rights resolution (who may do what in a collection)
- validation: parsing of identifiers and enum values from requests
"""
