"""
Products module - persistence of catalog products.

Product domain logic lives in the brands module next to the Brand
aggregate; this app owns the product table.
"""
