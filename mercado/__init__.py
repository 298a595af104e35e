"""Dates, people, groups, customers, products, carts and branches, with two command interpreters."""

__version__ = "1.0.0"