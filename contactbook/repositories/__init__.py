"""Repository interfaces and implementations.

This package defines the abstract contact repository and concrete
implementations, such as the JSON file adapter under
:mod:`contactbook.repositories.json_file`.
"""
