"""File-backed contact store.

>>> from contactbook import ContactStore
>>> store = ContactStore("db/contacts.json")  # doctest: +SKIP
"""

from contactbook.application.services.contact_store import ContactStore
from contactbook.domain.entities import Contact
from contactbook.domain.result import Result

__all__ = ["Contact", "ContactStore", "Result"]
__version__ = "0.1.0"
