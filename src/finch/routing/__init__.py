"""Routing — ordered route table with first-match lookup.

Routes are registered during setup and the table is sealed when the
app starts serving requests.
"""
