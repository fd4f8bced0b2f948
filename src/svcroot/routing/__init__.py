"""Routing — compiled route table plus the service-root route constraint.

Routes are registered during setup and compiled into an immutable
lookup structure. The constraint then locates the escaped service root
for each match.
"""
