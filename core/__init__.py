"""
Shared kernel of the catalog service.

Entity and event base classes, the repository port with its Django and
in-memory adapters, the specification engine and the paging model.
"""
